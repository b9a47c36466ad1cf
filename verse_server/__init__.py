"""
Server package for the Quran verse matcher.
Imports the application factory.
"""

from verse_server.app_factory import create_app

__all__ = [
    'create_app'
]
