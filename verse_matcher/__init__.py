"""
Quran verse matcher.

Resolves speech-recognition transcripts to Quran verse references and
searches the Quran corpus by Arabic text or English translation.
"""

__version__ = "1.0.0"

from verse_matcher.exceptions import (
    CorpusDataError,
    NotLoadedError,
    PhraseTableError,
    QuranAPIError,
    TranscriptionError,
    VerseMatcherError,
)
from verse_matcher.matching import VerseMatcher
from verse_matcher.models import CorpusMatch, MatchResult, MatchType
from verse_matcher.search import CorpusSearchService

__all__ = [
    "__version__",
    "CorpusDataError",
    "CorpusMatch",
    "CorpusSearchService",
    "MatchResult",
    "MatchType",
    "NotLoadedError",
    "PhraseTableError",
    "QuranAPIError",
    "TranscriptionError",
    "VerseMatcher",
    "VerseMatcherError",
]
