"""
Reference data models: surah metadata, phrase table entries and corpus verses.
"""

from pydantic import BaseModel, ConfigDict, Field

from verse_matcher.config import TOTAL_SURAHS


class SurahInfo(BaseModel):
    """
    Metadata for a single surah.

    Attributes:
        number: Surah number (1-114)
        name: Arabic name
        name_en: Transliterated name, used for display
        total_verses: Number of ayahs in the surah
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, le=TOTAL_SURAHS)
    name: str
    name_en: str
    total_verses: int = Field(..., ge=1)


class VersePhrase(BaseModel):
    """
    A phrase table entry mapping a short spoken phrase to the verse it comes from.

    The phrase is stored normalized (see normalize_phrase) so it can be compared
    directly against a normalized transcript.
    """

    model_config = ConfigDict(frozen=True)

    phrase: str = Field(..., min_length=1)
    surah: int = Field(..., ge=1, le=TOTAL_SURAHS)
    ayah: int = Field(..., ge=1)
    arabic_text: str = Field(..., serialization_alias="arabicText")


class CorpusVerse(BaseModel):
    """A flattened verse record held by the corpus search index."""

    model_config = ConfigDict(frozen=True)

    surah: int = Field(..., ge=1)
    ayah: int = Field(..., ge=1)
    arabic: str
    english: str
