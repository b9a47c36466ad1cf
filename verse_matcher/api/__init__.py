"""
Remote Quran API access and voice command parsing.
"""

from verse_matcher.api.quran_cloud import QuranCloudClient
from verse_matcher.api.voice_commands import parse_voice_command
