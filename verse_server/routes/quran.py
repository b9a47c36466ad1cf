"""
Routes for reading Quran text: surah list, whole surahs and single ayahs.
"""
import logging

from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from verse_server.services.quran_service import get_ayah, get_surah, list_surahs, parse_editions

logger = logging.getLogger(__name__)

quran_bp = Blueprint('quran_bp', __name__, url_prefix='/api')


def _client():
    return getattr(current_app, 'quran_client', None)


def _respond(result):
    response_data, error_message, status_code = result
    if error_message:
        return jsonify({'error': error_message}), status_code
    return jsonify(response_data), status_code


@quran_bp.route('/surahs', methods=['GET'])
def handle_list_surahs():
    try:
        client = _client()
        if client is None:
            return jsonify({'error': 'Quran service unavailable'}), 503
        return _respond(list_surahs(client))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[QuranRoute] Unexpected error in /api/surahs handler: {e}")
        return jsonify({'error': 'An error occurred while fetching the surah list'}), 500


@quran_bp.route('/surah/<int:number>', methods=['GET'])
def handle_get_surah(number):
    """Arabic text and English translation of a whole surah, with audio links."""
    try:
        client = _client()
        if client is None:
            return jsonify({'error': 'Quran service unavailable'}), 503
        return _respond(get_surah(client, number))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[QuranRoute] Unexpected error in /api/surah handler: {e}")
        return jsonify({'error': 'An error occurred while fetching the surah'}), 500


@quran_bp.route('/ayah/<reference>', methods=['GET'])
def handle_get_ayah(reference):
    """One ayah; `?editions=quran-uthmani,en.asad` fetches several editions at once."""
    try:
        client = _client()
        if client is None:
            return jsonify({'error': 'Quran service unavailable'}), 503

        editions = parse_editions(request.args.get('editions'))
        if editions is None:
            return jsonify({'error': 'editions must be a comma separated list of edition identifiers'}), 400
        return _respond(get_ayah(client, reference, editions))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[QuranRoute] Unexpected error in /api/ayah handler: {e}")
        return jsonify({'error': 'An error occurred while fetching the ayah'}), 500
