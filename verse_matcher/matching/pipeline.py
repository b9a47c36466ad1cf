"""
Verse matching pipeline: substring match -> fuzzy match -> remote search -> no match.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from verse_matcher.api.quran_cloud import QuranCloudClient
from verse_matcher.data.loader import load_phrase_table, load_surahs
from verse_matcher.data.preprocessing import normalize_phrase
from verse_matcher.matching.phrase_matcher import PhraseMatcher
from verse_matcher.matching.remote_search import RemoteVerseSearch
from verse_matcher.models import MatchResult

logger = logging.getLogger(__name__)


class VerseMatcher:
    """Aligns a finished transcript with a single Quran verse.

    Local stages are pure and run against the read-only phrase table, so one
    instance can serve concurrent callers. The remote stage makes one
    blocking HTTP call and never raises.
    """

    def __init__(self, phrase_matcher: PhraseMatcher, remote_search: Optional[RemoteVerseSearch] = None):
        self.phrase_matcher = phrase_matcher
        self.remote_search = remote_search

    @classmethod
    def from_config(cls, phrases_path: Optional[Union[str, Path]] = None,
                    surahs_path: Optional[Union[str, Path]] = None,
                    enable_remote: bool = True,
                    client: Optional[QuranCloudClient] = None) -> "VerseMatcher":
        """Build a matcher from the bundled (or given) surah metadata and phrase table."""
        surahs = load_surahs(surahs_path)
        phrases = load_phrase_table(phrases_path, surahs=surahs)
        remote = None
        if enable_remote:
            remote = RemoteVerseSearch(client or QuranCloudClient(), surahs)
        logger.info(
            f"[VerseMatcher] Ready with {len(phrases)} phrases "
            f"(remote search {'enabled' if remote else 'disabled'})."
        )
        return cls(PhraseMatcher(phrases, surahs), remote)

    def match_local(self, transcript: str) -> Optional[MatchResult]:
        """Run only the phrase-table stages (substring, then fuzzy)."""
        normalized = normalize_phrase(transcript)
        if not normalized:
            return None

        result = self.phrase_matcher.match_exact(normalized)
        if result is None:
            result = self.phrase_matcher.match_fuzzy(normalized)
        return result

    def match(self, transcript: str) -> Optional[MatchResult]:
        """
        Find the verse a transcript refers to.

        Args:
            transcript: Raw text from speech recognition

        Returns:
            MatchResult, or None when no stage produced a match
        """
        if not transcript or not transcript.strip():
            return None

        result = self.match_local(transcript)
        if result is None and self.remote_search is not None:
            logger.info("[VerseMatcher] No local match, falling back to remote search.")
            result = self.remote_search.search(transcript)

        if result:
            logger.info(
                f"[VerseMatcher] Matched {result.surah_name} {result.surah}:{result.ayah} "
                f"({result.match_type.value}, confidence={result.confidence:.2f})"
            )
        else:
            logger.info("[VerseMatcher] No match found.")
        return result
