from verse_matcher.matching.phrase_matcher import PhraseMatcher
from verse_matcher.matching.remote_search import RemoteVerseSearch
from verse_matcher.matching.pipeline import VerseMatcher
