"""
Service layer for Quran text lookups proxied from Al-Quran Cloud.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from verse_matcher.api.quran_cloud import QuranCloudClient
from verse_matcher.config import EDITION_ARABIC, TOTAL_SURAHS
from verse_matcher.exceptions import QuranAPIError

logger = logging.getLogger(__name__)

# "2:255" or a global ayah number
_AYAH_REFERENCE = re.compile(r'^(\d{1,3}:\d{1,3}|\d{1,4})$')
_EDITION = re.compile(r'^[a-z]{2,3}\.[\w-]+$|^quran-[\w-]+$')


def list_surahs(client: QuranCloudClient) -> Tuple[Optional[Dict], Optional[str], int]:
    """Returns:
        Tuple containing: (response_data, error_message, status_code).
    """
    try:
        surahs = client.list_surahs()
    except QuranAPIError as e:
        logger.error(f"[QuranService] Surah list failed: {e}")
        return None, "Quran service unavailable", 502
    return {'surahs': surahs, 'count': len(surahs)}, None, 200


def get_surah(client: QuranCloudClient, number: int) -> Tuple[Optional[Dict], Optional[str], int]:
    if not 1 <= number <= TOTAL_SURAHS:
        return None, f"Surah number must be between 1 and {TOTAL_SURAHS}", 400
    try:
        surah = client.fetch_surah(number)
    except QuranAPIError as e:
        logger.error(f"[QuranService] Surah {number} failed: {e}")
        return None, "Quran service unavailable", 502
    return surah.model_dump(), None, 200


def parse_editions(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated editions parameter; None if any identifier is invalid."""
    if not value:
        return [EDITION_ARABIC]
    editions = [item.strip() for item in value.split(',') if item.strip()]
    if not editions or not all(_EDITION.match(edition) for edition in editions):
        return None
    return editions


def get_ayah(client: QuranCloudClient, reference: str,
             editions: List[str]) -> Tuple[Optional[Dict], Optional[str], int]:
    """Fetch one ayah in one edition, or in several at once."""
    if not _AYAH_REFERENCE.match(reference):
        return None, "Ayah reference must look like '2:255' or be a global ayah number", 400
    try:
        if len(editions) == 1:
            ayahs = [client.fetch_ayah(reference, edition=editions[0])]
        else:
            ayahs = client.fetch_ayah_editions(reference, editions)
    except QuranAPIError as e:
        if e.status_code in (400, 404):
            return None, f"Ayah {reference} not found", 404
        logger.error(f"[QuranService] Ayah {reference} failed: {e}")
        return None, "Quran service unavailable", 502

    return {
        'reference': reference,
        'editions': editions,
        'ayahs': [ayah.model_dump() for ayah in ayahs],
    }, None, 200
