"""
Speech-to-text through the OpenAI Whisper API.
"""
import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from verse_matcher.exceptions import TranscriptionError

logger = logging.getLogger(__name__)


def language_code(language: Optional[str]) -> Optional[str]:
    """Reduce a language tag to the ISO-639-1 code Whisper expects ('en-US' -> 'en')."""
    if not language:
        return None
    code = language.split('-')[0].strip().lower()
    return code or None


class WhisperTranscriber:
    """Transcribes audio files with a hosted Whisper model.

    Without an API key the transcriber is 'not configured' and returns a fixed
    placeholder text instead of calling out, so the rest of the pipeline can
    still be exercised locally.
    """

    def __init__(self, api_key: Optional[str], model: str = "whisper-1",
                 placeholder: str = "", client=None):
        self.model = model
        self.placeholder = placeholder
        self._client = client
        if self._client is None and api_key:
            self._client = OpenAI(api_key=api_key)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def transcribe(self, audio_path: str, language: Optional[str] = None) -> str:
        """
        Transcribe an audio file.

        Args:
            audio_path: Path to the saved upload
            language: Language tag such as 'en-US'; only the primary subtag is sent

        Returns:
            Transcribed text (the placeholder when not configured)

        Raises:
            TranscriptionError: If the file cannot be read or the API call fails
        """
        if not self.is_configured:
            logger.warning("[Transcriber] No transcription service configured, returning placeholder.")
            return self.placeholder

        kwargs = {"model": self.model, "response_format": "json"}
        code = language_code(language)
        if code:
            kwargs["language"] = code

        try:
            with open(audio_path, 'rb') as audio_file:
                response = self._client.audio.transcriptions.create(file=audio_file, **kwargs)
        except OSError as e:
            raise TranscriptionError(f"Cannot read audio file: {e}", audio_path=audio_path) from e
        except OpenAIError as e:
            raise TranscriptionError(f"OpenAI transcription failed: {e}", audio_path=audio_path) from e

        text = getattr(response, 'text', None) or ""
        logger.info(f"[Transcriber] Transcribed {audio_path}: {text!r}")
        return text
