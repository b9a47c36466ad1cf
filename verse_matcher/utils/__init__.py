"""
Utility functions for the verse matcher project.
"""

from verse_matcher.utils.distance_utils import levenshtein_distance, similarity
from verse_matcher.utils.logging_utils import setup_logging
from verse_matcher.utils.text_utils import format_reference, to_arabic_number
