"""
Approximate full-text search over the whole Quran corpus (Arabic text and English translation).
"""
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError
from rapidfuzz import fuzz

from verse_matcher.config import (
    SEARCH_DEFAULT_LIMIT,
    SEARCH_FIELD_WEIGHTS,
    SEARCH_MIN_MATCH_CHAR_LENGTH,
    SEARCH_THRESHOLD,
)
from verse_matcher.data.loader import load_corpus_file
from verse_matcher.data.preprocessing import normalize_arabic_text
from verse_matcher.exceptions import CorpusDataError, NotLoadedError
from verse_matcher.models import CorpusMatch, CorpusVerse

logger = logging.getLogger(__name__)

# Stands in for a perfect (0.0) field score so it still ranks by weight
EPSILON = sys.float_info.epsilon


def flatten_corpus(corpus) -> List[CorpusVerse]:
    """Flatten the nested {surahs: [{number, ayahs: [{number, arabic, english}]}]} structure.

    Raises:
        CorpusDataError: On any missing or malformed part, or an empty corpus
    """
    if not isinstance(corpus, dict) or not isinstance(corpus.get('surahs'), list):
        raise CorpusDataError("Corpus must be an object with a 'surahs' list")

    verses = []
    for s_idx, surah in enumerate(corpus['surahs']):
        if not isinstance(surah, dict) or not isinstance(surah.get('ayahs'), list):
            raise CorpusDataError("Surah entry must have an 'ayahs' list", context={"surah_index": s_idx})
        for a_idx, ayah in enumerate(surah['ayahs']):
            if not isinstance(ayah, dict):
                raise CorpusDataError(
                    "Ayah entry must be an object",
                    context={"surah_index": s_idx, "ayah_index": a_idx},
                )
            try:
                verses.append(CorpusVerse(
                    surah=surah.get('number'),
                    ayah=ayah.get('number'),
                    arabic=ayah.get('arabic'),
                    english=ayah.get('english'),
                ))
            except ValidationError as e:
                raise CorpusDataError(
                    f"Invalid ayah record: {e}",
                    context={"surah_index": s_idx, "ayah_index": a_idx},
                ) from e

    if not verses:
        raise CorpusDataError("Corpus contains no verses")
    return verses


class CorpusSearchService:
    """Fuzzy verse search over a corpus loaded once at startup.

    Lifecycle is one-way: Unloaded -> Loaded. Searching before load_data()
    raises NotLoadedError. Reloading builds a complete new index and swaps it
    in with a single assignment, so searches running concurrently always see
    either the old or the new index.

    Scoring follows the Fuse.js model: each field gets a score in [0, 1]
    (0 = perfect), fields scoring above the threshold are ignored, and the
    item score is the weighted product of the matching field scores.
    """

    def __init__(self, threshold: float = SEARCH_THRESHOLD,
                 min_match_char_length: int = SEARCH_MIN_MATCH_CHAR_LENGTH,
                 weights: Optional[Dict[str, float]] = None,
                 normalize_arabic: bool = False):
        weights = dict(weights or SEARCH_FIELD_WEIGHTS)
        total = sum(weights.values())
        if total <= 0:
            raise ValueError("Field weights must sum to a positive value")

        self.threshold = threshold
        self.min_match_char_length = min_match_char_length
        self.weights = {field: weight / total for field, weight in weights.items()}
        self.normalize_arabic = normalize_arabic
        self._index = None

    def _prepare(self, field: str, text: str) -> str:
        if field == 'arabic' and self.normalize_arabic:
            return normalize_arabic_text(text)
        return text.lower()

    def load_data(self, corpus) -> int:
        """
        Flatten the corpus and (re)build the search index.

        Args:
            corpus: Nested corpus structure

        Returns:
            Number of verses indexed

        Raises:
            CorpusDataError: If the corpus is missing or malformed; the previous
                index, if any, stays in place
        """
        verses = flatten_corpus(corpus)
        index = tuple(
            (verse, {field: self._prepare(field, getattr(verse, field)) for field in self.weights})
            for verse in verses
        )
        self._index = index
        logger.info(f"[CorpusSearch] Indexed {len(index)} verses.")
        return len(index)

    def load_file(self, path: Optional[Union[str, Path]] = None) -> int:
        """Read a corpus JSON file and load it."""
        corpus = load_corpus_file(path)
        try:
            return self.load_data(corpus)
        except CorpusDataError as e:
            e.context.setdefault("source", str(path) if path else "bundled corpus")
            raise

    def is_data_loaded(self) -> bool:
        return self._index is not None

    def get_verse_count(self) -> int:
        index = self._index
        return len(index) if index else 0

    def _field_score(self, query: str, text: str) -> Optional[float]:
        if not query or not text:
            return None
        alignment = fuzz.partial_ratio_alignment(query, text, score_cutoff=(1 - self.threshold) * 100)
        if alignment is None:
            return None
        fragment = min(alignment.src_end - alignment.src_start, alignment.dest_end - alignment.dest_start)
        if fragment < self.min_match_char_length:
            return None
        return 1 - alignment.score / 100

    def _score(self, queries: Dict[str, str], fields: Dict[str, str]) -> Optional[float]:
        total = 1.0
        matched = False
        for field, weight in self.weights.items():
            score = self._field_score(queries[field], fields[field])
            if score is None:
                continue
            total *= max(score, EPSILON) ** weight
            matched = True
        return total if matched else None

    def find_verse(self, text: str, limit: Optional[int] = SEARCH_DEFAULT_LIMIT) -> List[CorpusMatch]:
        """
        Find the verses that best match the given text.

        Match position is not penalized: an exact hit deep inside a long
        verse scores the same as one at its start.

        Args:
            text: Search query (Arabic or English)
            limit: Maximum number of results (default: 3)

        Returns:
            Up to `limit` matches ordered by descending confidence (0-100);
            empty for a blank query

        Raises:
            NotLoadedError: If no corpus has been loaded, for every input
        """
        index = self._index
        if index is None:
            raise NotLoadedError()

        if not text or not text.strip():
            return []

        query = text.strip()
        queries = {field: self._prepare(field, query) for field in self.weights}

        scored = []
        for position, (verse, fields) in enumerate(index):
            score = self._score(queries, fields)
            if score is not None:
                scored.append((score, position, verse))

        scored.sort(key=lambda item: (item[0], item[1]))
        if limit is not None and limit >= 0:
            scored = scored[:limit]

        return [
            CorpusMatch(
                surah=verse.surah,
                ayah=verse.ayah,
                arabic=verse.arabic,
                english=verse.english,
                confidence=round(max(0.0, min(100.0, (1 - score) * 100)), 2),
            )
            for score, _, verse in scored
        ]
