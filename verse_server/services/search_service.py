"""
Service layer for corpus search and transcript matching.
"""
import logging
from typing import Dict, Optional, Tuple

from verse_matcher.exceptions import NotLoadedError
from verse_matcher.matching import VerseMatcher
from verse_matcher.models import CorpusMatch, MatchResult
from verse_matcher.search import CorpusSearchService
from verse_matcher.utils.text_utils import to_arabic_number

logger = logging.getLogger(__name__)


def format_corpus_match(match: CorpusMatch) -> Dict:
    return match.model_dump()


def format_match_result(result: MatchResult) -> Dict:
    """Serialize a MatchResult with Arabic-numeral display fields for the client."""
    data = result.model_dump(by_alias=True, mode='json')
    data['surahNumberAr'] = to_arabic_number(result.surah)
    data['ayahNumberAr'] = to_arabic_number(result.ayah)
    return data


def search_corpus(search_service: CorpusSearchService, query: str,
                  limit: int) -> Tuple[Optional[Dict], Optional[str], int]:
    """Run a corpus search and shape the response.

    Returns:
        Tuple containing: (response_data, error_message, status_code).
    """
    try:
        matches = search_service.find_verse(query.strip(), limit)
    except NotLoadedError as e:
        logger.error(f"[SearchService] {e}")
        return None, "Quran data not available", 503

    results = [format_corpus_match(m) for m in matches]
    logger.info(f"[SearchService] {len(results)} result(s) for {query!r}")
    return {
        'success': True,
        'query': query,
        'results': results,
        'count': len(results),
    }, None, 200


def match_transcript(verse_matcher: VerseMatcher, transcript: str) -> Tuple[Optional[Dict], Optional[str], int]:
    """Resolve a transcript to a single verse.

    No match is a normal outcome and answers 200 with matched=False.
    """
    result = verse_matcher.match(transcript)
    return {
        'matched': result is not None,
        'transcript': transcript,
        'match': format_match_result(result) if result else None,
    }, None, 200
