"""
Route for spoken verse lookups.
"""
import logging

from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from verse_server.services.voice_command_service import process_voice_command
from verse_server.utils.upload import get_audio_upload

logger = logging.getLogger(__name__)

voice_command_bp = Blueprint('voice_command_bp', __name__, url_prefix='/')


@voice_command_bp.route('/voice-command', methods=['POST'])
def handle_voice_command():
    """Transcribe the uploaded 'audio' and return the best matching verses."""
    try:
        transcriber = getattr(current_app, 'transcriber', None)
        search_service = getattr(current_app, 'search_service', None)
        if transcriber is None or search_service is None:
            logger.error("[VoiceCommandRoute] Service dependencies (transcriber/search) not available.")
            return jsonify({'status': 'error', 'error': 'Voice command service is not properly configured.'}), 503

        audio_file, error_body = get_audio_upload(request.files, current_app.config['ALLOWED_AUDIO_MIMES'])
        if error_body:
            return jsonify({'status': 'error', **error_body}), 400

        language = request.form.get('language') or current_app.config['DEFAULT_LANGUAGE']
        response_data, _, status_code = process_voice_command(
            audio_file,
            language,
            transcriber,
            search_service,
            current_app.config['VOICE_COMMAND_MATCH_LIMIT'],
        )
        return jsonify(response_data), status_code

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[VoiceCommandRoute] Unexpected error in /voice-command handler: {e}")
        return jsonify({'status': 'error', 'error': f'An unexpected server error occurred: {type(e).__name__}'}), 500
