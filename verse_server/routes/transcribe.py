"""
Routes for audio transcription.
"""
import logging

from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from verse_server.services.transcription_service import transcribe_upload
from verse_server.utils.upload import get_audio_upload

logger = logging.getLogger(__name__)

transcribe_bp = Blueprint('transcribe_bp', __name__, url_prefix='/')


@transcribe_bp.route('/transcribe', methods=['POST'])
def handle_transcribe():
    """Handle multipart audio uploads ('audio' field, optional 'language')."""
    try:
        transcriber = getattr(current_app, 'transcriber', None)
        if transcriber is None:
            logger.error("[TranscribeRoute] Transcriber not available.")
            return jsonify({'error': 'Transcription service is not properly configured.'}), 503

        audio_file, error_body = get_audio_upload(request.files, current_app.config['ALLOWED_AUDIO_MIMES'])
        if error_body:
            return jsonify(error_body), 400

        language = request.form.get('language') or current_app.config['DEFAULT_LANGUAGE']
        logger.info(f"[TranscribeRoute] Received {audio_file.filename} (language={language})")

        response_data, error_message, status_code = transcribe_upload(audio_file, language, transcriber)
        if error_message:
            return jsonify({'error': 'Transcription failed', 'message': error_message}), status_code
        return jsonify(response_data), status_code

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[TranscribeRoute] Unexpected error in /transcribe handler: {e}")
        return jsonify({'error': 'Server error', 'message': type(e).__name__}), 500
