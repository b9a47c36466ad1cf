"""
Text normalization for transcripts, phrase table entries and corpus text.
"""
import re
import unicodedata

# Arabic diacritics (tashkeel), Quranic annotation marks and tatweel
_ARABIC_DIACRITICS = re.compile(r'[\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06ED\u0640]')
# Keep word characters, whitespace, apostrophes, hyphens and the Arabic block
_PUNCTUATION = re.compile(r"[^\w\s'\-\u0600-\u06FF]")
_APOSTROPHES = str.maketrans({'\u2018': "'", '\u2019': "'", '\u02BC': "'", '`': "'"})


def normalize_phrase(text: str, strip_punctuation: bool = True) -> str:
    """Convert raw transcript text into the canonical form used for matching.

    This function:
    1. Lowercases and trims the text
    2. Removes Arabic diacritics and tatweel
    3. Removes Latin combining marks (e.g. 'ā' -> 'a') and hamza carriers
    4. Optionally drops punctuation other than apostrophes and hyphens
    5. Collapses runs of whitespace

    Never fails: anything that is not a non-empty string normalizes to "".
    """
    if not text or not isinstance(text, str):
        return ""

    text = _ARABIC_DIACRITICS.sub('', text)
    text = unicodedata.normalize('NFKD', text)
    text = ''.join(c for c in text if not unicodedata.combining(c))
    text = text.translate(_APOSTROPHES).lower()

    if strip_punctuation:
        text = _PUNCTUATION.sub('', text)

    return ' '.join(text.split())


def normalize_arabic_text(text: str) -> str:
    """Normalize Arabic text for diacritic-insensitive comparison.

    This function:
    1. Removes all diacritics (tashkeel)
    2. Normalizes various forms of alef
    3. Normalizes hamza forms
    4. Removes tatweel (stretching character)
    5. Normalizes teh marbuta to heh and alef maksura to yeh
    6. Drops any non-Arabic characters
    """
    if not text or not isinstance(text, str):
        return ""

    text = _ARABIC_DIACRITICS.sub('', text)

    # Normalize alef variations to plain alef
    text = re.sub(r'[إأٱآ]', 'ا', text)

    # Hamza on waw/yeh becomes a plain hamza
    text = re.sub(r'[ؤئ]', 'ء', text)

    text = text.replace('ة', 'ه')
    text = text.replace('ى', 'ي')

    # Keep only Arabic letters and spaces
    text = re.sub(r'[^\u0621-\u063A\u0641-\u064A\s]', '', text)

    return ' '.join(text.split())
