"""
Routes for text search over the corpus and transcript-to-verse matching.
"""
import logging

from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from verse_server.services.search_service import match_transcript, search_corpus

logger = logging.getLogger(__name__)

search_bp = Blueprint('search_bp', __name__, url_prefix='/')


def _parse_limit(value, default: int, maximum: int):
    """Returns (limit, error_message)."""
    if value is None:
        return default, None
    if isinstance(value, bool) or not isinstance(value, int):
        return None, "limit must be an integer"
    if value < 1 or value > maximum:
        return None, f"limit must be between 1 and {maximum}"
    return value, None


@search_bp.route('/search', methods=['POST'])
def handle_search():
    """Search the corpus with a JSON body {query, limit?}."""
    try:
        search_service = getattr(current_app, 'search_service', None)
        if search_service is None:
            return jsonify({'error': 'Quran data not available'}), 503

        data = request.get_json(silent=True) or {}
        query = data.get('query') if isinstance(data, dict) else None
        if not isinstance(query, str) or not query.strip():
            return jsonify({'error': 'Query parameter is required and must be a non-empty string'}), 400

        limit, limit_error = _parse_limit(
            data.get('limit'),
            current_app.config['VOICE_COMMAND_MATCH_LIMIT'],
            current_app.config['MAX_SEARCH_LIMIT'],
        )
        if limit_error:
            return jsonify({'error': limit_error}), 400

        response_data, error_message, status_code = search_corpus(search_service, query, limit)
        if error_message:
            return jsonify({'error': error_message}), status_code
        return jsonify(response_data), status_code

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[SearchRoute] Unexpected error in /search handler: {e}")
        return jsonify({'error': 'An error occurred while searching the Quran'}), 500


@search_bp.route('/match', methods=['POST'])
def handle_match():
    """Resolve a transcript to one verse with a JSON body {transcript}."""
    try:
        verse_matcher = getattr(current_app, 'verse_matcher', None)
        if verse_matcher is None:
            return jsonify({'error': 'Verse matcher is not available'}), 503

        data = request.get_json(silent=True) or {}
        transcript = data.get('transcript') if isinstance(data, dict) else None
        if not isinstance(transcript, str):
            return jsonify({'error': 'transcript is required and must be a string'}), 400

        response_data, error_message, status_code = match_transcript(verse_matcher, transcript)
        if error_message:
            return jsonify({'error': error_message}), status_code
        return jsonify(response_data), status_code

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[SearchRoute] Unexpected error in /match handler: {e}")
        return jsonify({'error': 'An error occurred while matching the transcript'}), 500
