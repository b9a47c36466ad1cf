"""
Client for the Al-Quran Cloud REST API (https://alquran.cloud/api).
"""
import logging
from typing import List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from verse_matcher.config import (
    EDITION_ARABIC,
    EDITION_AUDIO,
    EDITION_ENGLISH,
    QURAN_API_BASE_URL,
    QURAN_API_TIMEOUT,
    QURAN_API_USER_AGENT,
    TOTAL_SURAHS,
)
from verse_matcher.exceptions import QuranAPIError
from verse_matcher.models import AyahText, SearchResult, SurahText

logger = logging.getLogger(__name__)


class QuranCloudClient:
    """Thin wrapper over the Al-Quran Cloud endpoints used by the app.

    Every failure (transport, HTTP status, API envelope, payload shape) is
    raised as QuranAPIError.
    """

    def __init__(self, base_url: str = QURAN_API_BASE_URL, timeout: Optional[float] = QURAN_API_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": QURAN_API_USER_AGENT})

    def _get(self, path: str, allow_not_found: bool = False):
        """GET an endpoint and return the `data` member of the API envelope."""
        url = f"{self.base_url}/{path}"
        logger.debug(f"[QuranCloud] GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise QuranAPIError(f"Request failed: {e}", url=url) from e

        if allow_not_found and response.status_code == 404:
            return None

        try:
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.HTTPError as e:
            raise QuranAPIError(f"Request failed: {e}", url=url, status_code=response.status_code) from e
        except ValueError as e:
            raise QuranAPIError(f"Invalid JSON response: {e}", url=url) from e

        if not isinstance(payload, dict) or payload.get('code') != 200:
            code = payload.get('code') if isinstance(payload, dict) else None
            if allow_not_found and code == 404:
                return None
            raise QuranAPIError("Unexpected API response", url=url, status_code=code)

        return payload.get('data')

    def search(self, keyword: str, surah: Optional[int] = None, edition: Optional[str] = None) -> List[SearchResult]:
        """
        Full-text search over one edition of the Quran.

        Args:
            keyword: Text to search for
            surah: Restrict the search to one surah (default: all)
            edition: Edition identifier to search (default: English translation)

        Returns:
            Matches in the order ranked by the API; empty if nothing matched
        """
        surah_param = str(surah) if surah else 'all'
        edition_param = edition or EDITION_ENGLISH
        try:
            keyword_param = quote(keyword.strip(), safe="")
        except UnicodeEncodeError as e:
            raise QuranAPIError(f"Search keyword cannot be encoded: {e}") from e

        data = self._get(f"search/{keyword_param}/{surah_param}/{edition_param}", allow_not_found=True)
        if not data:
            return []

        matches = data.get('matches', []) if isinstance(data, dict) else data
        try:
            return [
                SearchResult(
                    ayah=match['numberInSurah'],
                    surah=match['surah']['number'],
                    text=match['text'],
                    edition=_edition_identifier(match.get('edition'), edition_param),
                )
                for match in matches
            ]
        except (KeyError, TypeError, ValidationError) as e:
            raise QuranAPIError(f"Malformed search results: {e}") from e

    def fetch_surah(self, surah_number: int) -> SurahText:
        """Fetch a complete surah with Arabic text and English translation."""
        if not 1 <= surah_number <= TOTAL_SURAHS:
            raise ValueError(f"Surah number must be between 1 and {TOTAL_SURAHS}, got {surah_number}")

        arabic = self._get(f"surah/{surah_number}/{EDITION_ARABIC}")
        english = self._get(f"surah/{surah_number}/{EDITION_ENGLISH}")

        try:
            translations = [ayah['text'] for ayah in english['ayahs']]
            ayahs = [
                AyahText(
                    number=ayah['numberInSurah'],
                    text=ayah['text'],
                    translation=translations[idx] if idx < len(translations) else '',
                    audio=self.audio_url(ayah['number']),
                    surah_number=surah_number,
                    global_number=ayah['number'],
                )
                for idx, ayah in enumerate(arabic['ayahs'])
            ]
            return SurahText(
                number=surah_number,
                name=arabic['name'],
                name_translated=arabic['englishName'],
                name_english=arabic['englishNameTranslation'],
                ayahs=ayahs,
                total_ayahs=arabic['numberOfAyahs'],
                revelation_type=arabic['revelationType'],
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise QuranAPIError(f"Malformed surah payload: {e}") from e

    def fetch_ayah(self, reference: str, edition: str = EDITION_ARABIC) -> AyahText:
        """Fetch one ayah by reference ('2:255' or a global ayah number)."""
        data = self._get(f"ayah/{reference}/{edition}")
        try:
            return _parse_ayah(data)
        except (KeyError, TypeError, ValidationError) as e:
            raise QuranAPIError(f"Malformed ayah payload: {e}") from e

    def fetch_ayah_editions(self, reference: str, editions: List[str]) -> List[AyahText]:
        """Fetch one ayah in several editions at once."""
        data = self._get(f"ayah/{reference}/editions/{','.join(editions)}")
        try:
            return [_parse_ayah(item) for item in data]
        except (KeyError, TypeError, ValidationError) as e:
            raise QuranAPIError(f"Malformed ayah editions payload: {e}") from e

    def list_surahs(self) -> List[dict]:
        """Fetch the list of all surahs with their names."""
        data = self._get("surah")
        try:
            return [
                {
                    'number': surah['number'],
                    'name': surah['name'],
                    'name_translated': surah['englishName'],
                    'name_english': surah['englishNameTranslation'],
                }
                for surah in data
            ]
        except (KeyError, TypeError) as e:
            raise QuranAPIError(f"Malformed surah list: {e}") from e

    def audio_url(self, ayah_number: int, edition: str = EDITION_AUDIO) -> str:
        """URL of the recitation audio for a global ayah number."""
        return f"{self.base_url}/ayah/{ayah_number}/{edition}"


def _edition_identifier(edition, default: str) -> str:
    if isinstance(edition, dict):
        return edition.get('identifier', default)
    return edition or default


def _parse_ayah(data: dict) -> AyahText:
    identifier = _edition_identifier(data.get('edition'), '')
    return AyahText(
        number=data['numberInSurah'],
        text=data['text'],
        translation=data['text'] if identifier.startswith('en.') else '',
        surah_number=data['surah']['number'],
        global_number=data['number'],
    )
