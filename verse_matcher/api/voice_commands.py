"""
Parser for spoken navigation commands ("surah 36", "verse 2:255", "next", ...).
"""
import re

from verse_matcher.config import TOTAL_SURAHS
from verse_matcher.models import VoiceCommand

_NUMBER = re.compile(r'(\d+)')
_REFERENCE = re.compile(r'(\d+):(\d+)')
_SEARCH_WORDS = re.compile(r'(search|find)', re.IGNORECASE)


def parse_voice_command(command: str) -> VoiceCommand:
    """Map a transcribed command to a navigation action.

    Checks run in a fixed order: surah selection, search, ayah selection,
    next, previous. Anything else is 'unknown'.
    """
    text = (command or '').lower().strip()

    if 'surah' in text or 'chapter' in text:
        match = _NUMBER.search(text)
        if match:
            surah_number = int(match.group(1))
            if 1 <= surah_number <= TOTAL_SURAHS:
                return VoiceCommand(action='select_surah', params={'surah_number': surah_number})

    if 'search' in text or 'find' in text:
        keyword = _SEARCH_WORDS.sub('', text).strip()
        if keyword:
            return VoiceCommand(action='search', params={'keyword': keyword})

    if 'ayah' in text or 'verse' in text:
        match = _REFERENCE.search(text)
        if match:
            surah_number, ayah_number = int(match.group(1)), int(match.group(2))
            if 1 <= surah_number <= TOTAL_SURAHS:
                return VoiceCommand(
                    action='select_ayah',
                    params={'surah_number': surah_number, 'ayah_number': ayah_number},
                )

    if 'next' in text or 'forward' in text:
        return VoiceCommand(action='next')

    if 'previous' in text or 'back' in text:
        return VoiceCommand(action='previous')

    return VoiceCommand(action='unknown')
