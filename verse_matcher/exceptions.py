"""
Custom exceptions for the verse matcher.

All exceptions inherit from VerseMatcherError so callers can catch
library-specific errors in one place.
"""

from typing import Any


class VerseMatcherError(Exception):
    """Base exception for all verse matcher errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class NotLoadedError(VerseMatcherError):
    """Raised when the corpus search service is queried before load_data()."""

    def __init__(self, message: str = "Quran data not loaded. Call load_data() first.") -> None:
        super().__init__(message)


class CorpusDataError(VerseMatcherError):
    """Raised when the search corpus is missing or malformed."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if source:
            ctx["source"] = source
        super().__init__(message, ctx)
        self.source = source


class PhraseTableError(VerseMatcherError):
    """Raised when the phrase table or surah metadata fails validation."""

    def __init__(
        self,
        message: str,
        entry_index: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if entry_index is not None:
            ctx["entry"] = entry_index
        super().__init__(message, ctx)
        self.entry_index = entry_index


class QuranAPIError(VerseMatcherError):
    """Raised when a call to the Al-Quran Cloud API fails."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        ctx: dict[str, Any] = {}
        if url:
            ctx["url"] = url
        if status_code is not None:
            ctx["status"] = status_code
        super().__init__(message, ctx)
        self.url = url
        self.status_code = status_code


class TranscriptionError(VerseMatcherError):
    """Raised when audio transcription fails."""

    def __init__(
        self,
        message: str,
        audio_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if audio_path:
            ctx["audio_path"] = audio_path
        super().__init__(message, ctx)
        self.audio_path = audio_path


class ConfigurationError(VerseMatcherError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, setting_name: str | None = None) -> None:
        ctx = {"setting": setting_name} if setting_name else {}
        super().__init__(message, ctx)
        self.setting_name = setting_name
