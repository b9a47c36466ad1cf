"""
Bundled reference data (surah metadata, phrase table, sample corpus) and
the loaders and normalizers that read it.
"""

from verse_matcher.data.loader import (
    build_phrase_table,
    load_corpus_file,
    load_phrase_table,
    load_surahs,
)
from verse_matcher.data.preprocessing import normalize_arabic_text, normalize_phrase
