"""
Result data models produced by matching and searching.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class MatchType(str, Enum):
    """How a MatchResult was obtained."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    REMOTE_SEARCH = "remoteSearch"


class MatchResult(BaseModel):
    """
    Best verse reference for a single transcript.

    Attributes:
        surah: Resolved surah number
        ayah: Resolved ayah number
        surah_name: Display name of the surah
        matched_text: Phrase or verse text that justified the match
        confidence: 0.9 for exact matches, the raw similarity for fuzzy
            matches, 0.7 for remote search hits
        match_type: exact, fuzzy or remoteSearch
        ayah_text: Text of the verse, when known
    """

    surah: int = Field(..., ge=1)
    ayah: int = Field(..., ge=1)
    surah_name: str = Field(..., serialization_alias="surahName")
    matched_text: str = Field(..., serialization_alias="matchedText")
    confidence: float = Field(..., ge=0.0, le=1.0)
    match_type: MatchType = Field(..., serialization_alias="matchType")
    ayah_text: Optional[str] = Field(default=None, serialization_alias="ayahText")

    @computed_field
    @property
    def reference(self) -> str:
        """Verse reference in surah:ayah form."""
        return f"{self.surah}:{self.ayah}"

    def __str__(self) -> str:
        return (
            f"MatchResult({self.reference} {self.surah_name}, "
            f"{self.match_type.value}, confidence={self.confidence:.2f})"
        )


class CorpusMatch(BaseModel):
    """A ranked corpus search hit. Confidence is a percentage (0-100)."""

    surah: int
    ayah: int
    arabic: str
    english: str
    confidence: float = Field(..., ge=0.0, le=100.0)


class SearchResult(BaseModel):
    """A record returned by the remote Al-Quran Cloud search endpoint."""

    ayah: int
    surah: int
    text: str
    edition: str


class AyahText(BaseModel):
    """A single ayah fetched from Al-Quran Cloud."""

    number: int = Field(..., description="Ayah number within its surah")
    text: str
    translation: str = ""
    audio: Optional[str] = None
    surah_number: int
    global_number: int = Field(..., description="Ayah number across the whole Quran")


class SurahText(BaseModel):
    """A complete surah with Arabic text and English translation."""

    number: int
    name: str
    name_translated: str
    name_english: str
    ayahs: list[AyahText]
    total_ayahs: int
    revelation_type: str


class VoiceCommand(BaseModel):
    """A parsed navigation command."""

    action: str
    params: dict = Field(default_factory=dict)
