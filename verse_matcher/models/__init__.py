"""
Pydantic data models for the verse matcher.

- SurahInfo: surah metadata
- VersePhrase: a phrase table entry
- CorpusVerse: a verse held by the corpus search index
- MatchResult / MatchType: outcome of matching a transcript
- CorpusMatch: a ranked corpus search hit
- SearchResult, AyahText, SurahText: Al-Quran Cloud payloads
- VoiceCommand: a parsed navigation command
"""

from verse_matcher.models.verse import CorpusVerse, SurahInfo, VersePhrase
from verse_matcher.models.result import (
    AyahText,
    CorpusMatch,
    MatchResult,
    MatchType,
    SearchResult,
    SurahText,
    VoiceCommand,
)

__all__ = [
    "AyahText",
    "CorpusMatch",
    "CorpusVerse",
    "MatchResult",
    "MatchType",
    "SearchResult",
    "SurahInfo",
    "SurahText",
    "VersePhrase",
    "VoiceCommand",
]
