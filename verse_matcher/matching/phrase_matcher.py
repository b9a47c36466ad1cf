"""
Local phrase-table matching: substring containment first, Levenshtein similarity second.
"""
import logging
from typing import Dict, List, Optional, Sequence

from verse_matcher.config import EXACT_MATCH_CONFIDENCE, FUZZY_SIMILARITY_THRESHOLD
from verse_matcher.models import MatchResult, MatchType, SurahInfo, VersePhrase
from verse_matcher.utils.distance_utils import similarity

logger = logging.getLogger(__name__)


class PhraseMatcher:
    """Matches normalized transcripts against an ordered phrase table.

    The table order is a fixed priority list: the substring pass returns the
    first entry whose phrase occurs in the transcript, and the fuzzy pass
    breaks similarity ties in favour of the earlier entry.
    """

    def __init__(self, phrases: Sequence[VersePhrase], surahs: Dict[int, SurahInfo],
                 exact_confidence: float = EXACT_MATCH_CONFIDENCE,
                 fuzzy_threshold: float = FUZZY_SIMILARITY_THRESHOLD):
        self.phrases: tuple = tuple(phrases)
        self.surahs = surahs
        self.exact_confidence = exact_confidence
        self.fuzzy_threshold = fuzzy_threshold

    def __len__(self):
        return len(self.phrases)

    def surah_name(self, surah_number: int) -> str:
        info = self.surahs.get(surah_number)
        return info.name_en if info else f"Surah {surah_number}"

    def _to_result(self, entry: VersePhrase, confidence: float, match_type: MatchType) -> MatchResult:
        return MatchResult(
            surah=entry.surah,
            ayah=entry.ayah,
            surah_name=self.surah_name(entry.surah),
            matched_text=entry.phrase,
            confidence=confidence,
            match_type=match_type,
            ayah_text=entry.arabic_text,
        )

    def match_exact(self, normalized: str) -> Optional[MatchResult]:
        """Return the first entry whose phrase is contained in the transcript."""
        if not normalized:
            return None
        for entry in self.phrases:
            if entry.phrase in normalized:
                logger.debug(f"[PhraseMatcher] Substring match '{entry.phrase}' -> {entry.surah}:{entry.ayah}")
                return self._to_result(entry, self.exact_confidence, MatchType.EXACT)
        return None

    def score_all(self, normalized: str) -> List[float]:
        """Similarity of the transcript against every entry, in table order."""
        return [similarity(normalized, entry.phrase) for entry in self.phrases]

    def match_fuzzy(self, normalized: str) -> Optional[MatchResult]:
        """Return the most similar entry, if its similarity clears the threshold."""
        best_entry = None
        best_score = self.fuzzy_threshold

        for entry, score in zip(self.phrases, self.score_all(normalized)):
            # strict '>' keeps the first entry on ties and rejects scores equal to the threshold
            if score > best_score:
                best_entry, best_score = entry, score

        if best_entry is None:
            return None

        logger.debug(
            f"[PhraseMatcher] Fuzzy match '{best_entry.phrase}' -> "
            f"{best_entry.surah}:{best_entry.ayah} (similarity={best_score:.3f})"
        )
        return self._to_result(best_entry, best_score, MatchType.FUZZY)
