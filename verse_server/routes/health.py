import logging

from flask import Blueprint, jsonify, current_app

health_bp = Blueprint('health_bp', __name__, url_prefix='/')
logger = logging.getLogger(__name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Reports the state of each service; 503 when matching or search cannot serve requests."""
    services_status = {}

    verse_matcher = getattr(current_app, 'verse_matcher', None)
    if verse_matcher is not None:
        services_status["verse_matcher"] = "loaded"
    else:
        services_status["verse_matcher"] = "error"
        logger.warning("Health check: Verse matcher not initialized.")

    search_service = getattr(current_app, 'search_service', None)
    if search_service is not None and search_service.is_data_loaded():
        services_status["quran_corpus"] = "loaded"
    else:
        services_status["quran_corpus"] = "error"
        logger.warning("Health check: Quran corpus not loaded.")

    transcriber = getattr(current_app, 'transcriber', None)
    if transcriber is None:
        services_status["transcription"] = "error"
    else:
        services_status["transcription"] = "configured" if transcriber.is_configured else "not configured"

    if services_status["verse_matcher"] == "error" or services_status["quran_corpus"] == "error":
        return jsonify({"status": "error", "services": services_status}), 503
    return jsonify({"status": "ok", "services": services_status}), 200
