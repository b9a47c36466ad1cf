"""
Server-specific configuration settings.

Values come from the environment and a local .env file, if present.
"""
import os

from dotenv import load_dotenv

from verse_matcher.config import QURAN_CORPUS_PATH, SEARCH_DEFAULT_LIMIT, SEARCH_NORMALIZE_ARABIC
from verse_matcher.exceptions import ConfigurationError

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"Expected an integer, got {value!r}", setting_name=name) from e


# --- Server Network Settings ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3000)

# --- Transcription Settings ---
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
WHISPER_MODEL = os.getenv("WHISPER_MODEL", "whisper-1")
DEFAULT_LANGUAGE = "en-US"  # Language tag used when the client sends none
TRANSCRIPTION_PLACEHOLDER = "[Transcription service not configured. Set OPENAI_API_KEY in .env]"

# --- Upload Constraints ---
MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB; Flask rejects larger bodies with 413
ALLOWED_AUDIO_MIMES = (
    "audio/m4a",
    "audio/mp4",
    "audio/mpeg",
    "audio/wav",
    "audio/webm",
    "audio/aac",
    "audio/x-m4a",
)
ALLOWED_AUDIO_FORMATS = ("m4a", "mp4", "mpeg", "wav", "webm", "aac")

# --- Verse Matching & Search Settings ---
CORPUS_PATH = os.getenv("CORPUS_PATH", str(QURAN_CORPUS_PATH))
PHRASES_PATH = os.getenv("PHRASES_PATH")  # None uses the bundled phrase table
SURAHS_PATH = os.getenv("SURAHS_PATH")  # None uses the bundled surah metadata
REMOTE_SEARCH_ENABLED = _env_bool("REMOTE_SEARCH_ENABLED", True)
SEARCH_NORMALIZE_ARABIC = _env_bool("SEARCH_NORMALIZE_ARABIC", SEARCH_NORMALIZE_ARABIC)
VOICE_COMMAND_MATCH_LIMIT = SEARCH_DEFAULT_LIMIT  # Verses returned per voice command
MAX_SEARCH_LIMIT = 50
