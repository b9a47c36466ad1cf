"""
Configuration parameters for the Quran verse matcher project.
"""
import os
from pathlib import Path

# Directory Paths
BASE_DIR = Path(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = BASE_DIR / "data"  # Bundled reference data
LOGS_DIR = "logs"  # Directory for script logs
SURAHS_DATA_PATH = DATA_DIR / "surahs.json"  # Surah metadata (names, verse counts)
PHRASES_DATA_PATH = DATA_DIR / "phrases.json"  # Phrase table used by the verse matcher
QURAN_CORPUS_PATH = DATA_DIR / "quran-data.json"  # Corpus for full-text search

# Quran Bounds
TOTAL_SURAHS = 114

# Phrase Matching Parameters
EXACT_MATCH_CONFIDENCE = 0.9  # Confidence reported for substring matches
FUZZY_SIMILARITY_THRESHOLD = 0.6  # Similarity must be strictly greater than this
REMOTE_SEARCH_CONFIDENCE = 0.7  # Confidence reported for remote search hits

# Corpus Search Parameters
SEARCH_THRESHOLD = 0.4  # 0.0 = exact, 1.0 = match anything
SEARCH_MIN_MATCH_CHAR_LENGTH = 2  # Shortest aligned fragment that counts as a match
SEARCH_DEFAULT_LIMIT = 3  # Results returned by find_verse when no limit is given
SEARCH_FIELD_WEIGHTS = {"arabic": 0.5, "english": 0.5}
SEARCH_NORMALIZE_ARABIC = False  # Strip Arabic diacritics before indexing and searching

# Al-Quran Cloud API
QURAN_API_BASE_URL = "https://api.alquran.cloud/v1"
QURAN_API_TIMEOUT = None  # Seconds; None keeps the HTTP client default
QURAN_API_USER_AGENT = "AmalVerseMatcher/1.0"
EDITION_ARABIC = "quran-uthmani"
EDITION_ENGLISH = "en.asad"
EDITION_AUDIO = "ar.alafasy"
REMOTE_SEARCH_EDITION = EDITION_ENGLISH  # Edition searched by the remote fallback
