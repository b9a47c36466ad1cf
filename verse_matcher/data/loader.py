"""
Loading and validation of the bundled reference data.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from verse_matcher.config import (
    PHRASES_DATA_PATH,
    QURAN_CORPUS_PATH,
    SURAHS_DATA_PATH,
    TOTAL_SURAHS,
)
from verse_matcher.data.preprocessing import normalize_phrase
from verse_matcher.exceptions import CorpusDataError, PhraseTableError
from verse_matcher.models import SurahInfo, VersePhrase

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_json(path: Path, error_cls):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise error_cls(f"Data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise error_cls(f"Invalid JSON in {path}: {e}") from e


def load_surahs(path: Optional[PathLike] = None) -> Dict[int, SurahInfo]:
    """
    Load surah metadata keyed by surah number.

    Args:
        path: JSON file with a list of surah records, defaults to the bundled table

    Returns:
        Dict mapping surah number to SurahInfo

    Raises:
        PhraseTableError: If the file is missing, malformed or does not cover 1-114
    """
    surahs_file = Path(path) if path else SURAHS_DATA_PATH
    logger.info(f"Loading surah metadata from: {surahs_file}")
    raw = _read_json(surahs_file, PhraseTableError)

    if not isinstance(raw, list):
        raise PhraseTableError(f"Surah metadata must be a list, got {type(raw).__name__}")

    surahs = {}
    for idx, item in enumerate(raw):
        try:
            info = SurahInfo.model_validate(item)
        except ValidationError as e:
            raise PhraseTableError(f"Invalid surah record: {e}", entry_index=idx) from e
        if info.number in surahs:
            raise PhraseTableError(f"Duplicate surah number {info.number}", entry_index=idx)
        surahs[info.number] = info

    if sorted(surahs) != list(range(1, TOTAL_SURAHS + 1)):
        raise PhraseTableError(
            f"Surah metadata must cover surahs 1-{TOTAL_SURAHS} exactly ({len(surahs)} found)"
        )

    logger.info(f"Loaded metadata for {len(surahs)} surahs.")
    return surahs


def build_phrase_table(raw: list, surahs: Dict[int, SurahInfo]) -> List[VersePhrase]:
    """
    Validate and normalize raw phrase table entries, preserving their order.

    Every entry must reference a real verse: its surah must exist in the
    metadata and its ayah must not exceed that surah's verse count.
    """
    if not isinstance(raw, list):
        raise PhraseTableError(f"Phrase table must be a list, got {type(raw).__name__}")

    table = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise PhraseTableError("Phrase entry must be an object", entry_index=idx)

        phrase = normalize_phrase(item.get('phrase'))
        try:
            entry = VersePhrase.model_validate({**item, 'phrase': phrase})
        except ValidationError as e:
            raise PhraseTableError(f"Invalid phrase entry: {e}", entry_index=idx) from e

        surah = surahs.get(entry.surah)
        if surah is None:
            raise PhraseTableError(f"Unknown surah {entry.surah}", entry_index=idx)
        if entry.ayah > surah.total_verses:
            raise PhraseTableError(
                f"Ayah {entry.ayah} out of range for surah {entry.surah} "
                f"({surah.total_verses} verses)",
                entry_index=idx,
            )
        table.append(entry)

    return table


def load_phrase_table(
    path: Optional[PathLike] = None,
    surahs: Optional[Dict[int, SurahInfo]] = None,
) -> List[VersePhrase]:
    """
    Load the phrase table used by the verse matcher.

    Args:
        path: JSON file with the ordered phrase list, defaults to the bundled table
        surahs: Surah metadata used for bounds checks, loaded if not given

    Returns:
        Ordered list of VersePhrase entries (order is match priority)
    """
    phrases_file = Path(path) if path else PHRASES_DATA_PATH
    if surahs is None:
        surahs = load_surahs()

    logger.info(f"Loading phrase table from: {phrases_file}")
    table = build_phrase_table(_read_json(phrases_file, PhraseTableError), surahs)
    logger.info(f"Loaded {len(table)} phrase table entries.")
    return table


def load_corpus_file(path: Optional[PathLike] = None) -> dict:
    """
    Read the raw nested corpus used by the corpus search service.

    Shape validation happens in CorpusSearchService.load_data().
    """
    corpus_file = Path(path) if path else QURAN_CORPUS_PATH
    logger.info(f"Loading Quran corpus from: {corpus_file}")
    return _read_json(corpus_file, CorpusDataError)
