"""
Service layer for spoken verse lookups: audio in, ranked verses out.
"""
import logging
import uuid
from typing import Dict, Optional, Tuple

from verse_matcher.api.voice_commands import parse_voice_command
from verse_matcher.exceptions import NotLoadedError, TranscriptionError
from verse_matcher.search import CorpusSearchService
from verse_server.services.search_service import format_corpus_match
from verse_server.utils.transcriber import WhisperTranscriber
from verse_server.utils.upload import safe_filename, saved_upload

logger = logging.getLogger(__name__)


def _command_id(filename: Optional[str]) -> str:
    stem = safe_filename(filename, default="").rsplit('.', 1)[0]
    return f"{stem}-{uuid.uuid4().hex[:8]}" if stem else uuid.uuid4().hex


def process_voice_command(audio_file_storage, language: str, transcriber: WhisperTranscriber,
                          search_service: CorpusSearchService,
                          limit: int) -> Tuple[Dict, Optional[str], int]:
    """Transcribe a recorded command and search the corpus for it.

    Spoken "search ..." / "find ..." commands search for their keyword only;
    anything else searches for the whole transcript.

    Unlike the other services, failures also carry a response body
    ({command_id, status: "error", error}) so the client can report them.

    Returns:
        Tuple containing: (response_data, error_message, status_code).
    """
    command_id = _command_id(audio_file_storage.filename)
    logger.info(f"[VoiceCommand] Processing command {command_id}")

    def failed(message: str, status_code: int):
        logger.error(f"[VoiceCommand] Command {command_id} failed: {message}")
        return {'command_id': command_id, 'status': 'error', 'error': message}, message, status_code

    if not search_service.is_data_loaded():
        return failed("Quran data not available", 503)

    try:
        with saved_upload(audio_file_storage) as audio_path:
            transcript = transcriber.transcribe(audio_path, language=language)
    except TranscriptionError as e:
        return failed(e.message, 502)
    except OSError as e:
        return failed(f"Failed to save uploaded audio file: {e}", 500)

    command = parse_voice_command(transcript)
    query = command.params["keyword"] if command.action == "search" else transcript

    try:
        matches = search_service.find_verse(query, limit)
    except NotLoadedError as e:
        return failed(e.message, 503)

    logger.info(f"[VoiceCommand] Command {command_id} completed with {len(matches)} match(es).")
    return {
        'command_id': command_id,
        'status': 'completed',
        'transcript': transcript,
        'command': command.model_dump(),
        'matches': [format_corpus_match(m) for m in matches],
    }, None, 200
