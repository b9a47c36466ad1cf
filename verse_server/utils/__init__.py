"""
Server utilities: logging setup, transcription and upload handling.
"""
