"""
Remote full-corpus search used when local phrase matching finds nothing.
"""
import logging
from typing import Dict, Optional

import requests
from pydantic import ValidationError

from verse_matcher.api.quran_cloud import QuranCloudClient
from verse_matcher.config import REMOTE_SEARCH_CONFIDENCE, REMOTE_SEARCH_EDITION
from verse_matcher.exceptions import QuranAPIError
from verse_matcher.models import MatchResult, MatchType, SurahInfo

logger = logging.getLogger(__name__)


class RemoteVerseSearch:
    """Resolves a transcript through the remote search endpoint.

    The endpoint's ranking is trusted: the first result wins and is reported
    with a fixed confidence. Failures never propagate; they are logged and
    reported as no match.
    """

    def __init__(self, client: QuranCloudClient, surahs: Dict[int, SurahInfo],
                 edition: str = REMOTE_SEARCH_EDITION,
                 confidence: float = REMOTE_SEARCH_CONFIDENCE):
        self.client = client
        self.surahs = surahs
        self.edition = edition
        self.confidence = confidence

    def search(self, transcript: str) -> Optional[MatchResult]:
        if not transcript or not transcript.strip():
            return None

        try:
            results = self.client.search(transcript, edition=self.edition)
        except (QuranAPIError, requests.exceptions.RequestException) as e:
            logger.warning(f"[RemoteSearch] Search failed, treating as no match: {e}")
            return None

        if not results:
            logger.info("[RemoteSearch] No remote results.")
            return None

        first = results[0]
        info = self.surahs.get(first.surah)
        try:
            return MatchResult(
                surah=first.surah,
                ayah=first.ayah,
                surah_name=info.name_en if info else f"Surah {first.surah}",
                matched_text=first.text,
                confidence=self.confidence,
                match_type=MatchType.REMOTE_SEARCH,
                ayah_text=first.text,
            )
        except ValidationError as e:
            logger.warning(f"[RemoteSearch] Unusable remote result {first}: {e}")
            return None
