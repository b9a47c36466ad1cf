import logging

from flask import Blueprint, jsonify, current_app

from verse_matcher import __version__

info_bp = Blueprint('info_bp', __name__, url_prefix='/')
logger = logging.getLogger(__name__)


@info_bp.route('/api/info', methods=['GET'])
def get_api_info():
    """Describes the API: endpoints, upload limits and the loaded matching/search services."""
    max_mb = current_app.config.get('MAX_CONTENT_LENGTH', 0) // (1024 * 1024)

    verse_matcher = getattr(current_app, 'verse_matcher', None)
    matcher_details = {"status": "not_initialized"}
    if verse_matcher is not None:
        phrase_matcher = verse_matcher.phrase_matcher
        matcher_details = {
            "status": "initialized",
            "phrases": len(phrase_matcher),
            "exact_confidence": phrase_matcher.exact_confidence,
            "fuzzy_threshold": phrase_matcher.fuzzy_threshold,
            "remote_search": verse_matcher.remote_search is not None,
        }

    search_service = getattr(current_app, 'search_service', None)
    search_details = {"status": "not_loaded"}
    if search_service is not None and search_service.is_data_loaded():
        search_details = {
            "status": "loaded",
            "verses": search_service.get_verse_count(),
            "threshold": search_service.threshold,
            "normalize_arabic": search_service.normalize_arabic,
        }

    return jsonify({
        "name": "Quran Verse Matcher API",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "info": "/api/info",
            "transcribe": "/transcribe",
            "search": "/search",
            "match": "/match",
            "voice_command": "/voice-command",
            "surahs": "/api/surahs",
            "surah": "/api/surah/<number>",
            "ayah": "/api/ayah/<reference>",
        },
        "limits": {
            "maxFileSize": f"{max_mb}MB",
            "allowedFormats": list(current_app.config.get('ALLOWED_AUDIO_FORMATS', ())),
        },
        "verse_matcher": matcher_details,
        "corpus_search": search_details,
    }), 200
