"""
Service layer for audio transcription.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from verse_matcher.exceptions import TranscriptionError
from verse_server.utils.transcriber import WhisperTranscriber
from verse_server.utils.upload import saved_upload

logger = logging.getLogger(__name__)


def transcribe_upload(audio_file_storage, language: str,
                      transcriber: WhisperTranscriber) -> Tuple[Optional[Dict], Optional[str], int]:
    """Save an uploaded audio file, transcribe it and format the result.

    Args:
        audio_file_storage: The FileStorage object from the Flask request.
        language: Language tag sent by the client (e.g. 'en-US').
        transcriber: The initialized WhisperTranscriber.

    Returns:
        Tuple containing: (response_data, error_message, status_code).
    """
    try:
        with saved_upload(audio_file_storage) as audio_path:
            text = transcriber.transcribe(audio_path, language=language)
    except TranscriptionError as e:
        logger.error(f"[TranscriptionService] {e}")
        return None, f"Transcription failed: {e.message}", 500
    except OSError as e:
        logger.error(f"[TranscriptionService] Failed to store upload: {e}", exc_info=True)
        return None, f"Failed to save uploaded audio file: {e}", 500

    response_data = {
        'text': text,
        'confidence': 1.0,
        'language': language,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }
    return response_data, None, 200
