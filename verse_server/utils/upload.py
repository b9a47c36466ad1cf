"""
Helpers for handling uploaded audio files.
"""
import os
import shutil
import tempfile
import logging
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def is_allowed_audio(mimetype, allowed_mimes) -> bool:
    """Uploads without a declared type are accepted; declared types must be on the list."""
    if not mimetype:
        return True
    return mimetype.split(';')[0].strip().lower() in allowed_mimes


def safe_filename(filename: str, default: str = "audio.m4a") -> str:
    """Keep only alphanumerics, dots, dashes and underscores from a client-supplied name."""
    name = os.path.basename(filename or "")
    cleaned = "".join(c for c in name if c.isalnum() or c in ('.', '-', '_')).strip('.')
    return cleaned or default


@contextmanager
def saved_upload(file_storage):
    """
    Save an uploaded file to a fresh temporary directory.

    Yields the saved path; the directory is removed on exit whether or not
    processing succeeded.
    """
    temp_dir = tempfile.mkdtemp(prefix="verse-upload-")
    try:
        path = os.path.join(temp_dir, "audio-" + safe_filename(file_storage.filename))
        file_storage.stream.seek(0)
        file_storage.save(path)
        logger.debug(f"[Upload] Saved upload to {path}")
        yield path
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)
        logger.debug(f"[Upload] Cleaned up {temp_dir}")


def get_audio_upload(files, allowed_mimes, field: str = 'audio'):
    """
    Pull the audio upload out of a request's files and validate it.

    Returns:
        Tuple of (file_storage, error_body); exactly one is None.
    """
    audio_file = files.get(field)
    if audio_file is None or not audio_file.filename:
        return None, {'error': 'No audio file provided',
                      'message': f'Please upload an audio file in the "{field}" field'}
    if not is_allowed_audio(audio_file.mimetype, allowed_mimes):
        return None, {'error': 'Invalid file type',
                      'message': 'Invalid file type. Only audio files are allowed.'}
    return audio_file, None
