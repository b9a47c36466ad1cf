"""
Shared fixtures for the verse matcher test suite.
"""
import json

import pytest

from verse_matcher.data.loader import load_corpus_file, load_phrase_table, load_surahs
from verse_matcher.matching import PhraseMatcher
from verse_matcher.search import CorpusSearchService


@pytest.fixture(scope="session")
def surahs():
    return load_surahs()


@pytest.fixture(scope="session")
def phrases(surahs):
    return load_phrase_table(surahs=surahs)


@pytest.fixture
def phrase_matcher(phrases, surahs):
    return PhraseMatcher(phrases, surahs)


@pytest.fixture
def sample_corpus():
    return load_corpus_file()


@pytest.fixture
def search_service(sample_corpus):
    service = CorpusSearchService()
    service.load_data(sample_corpus)
    return service


@pytest.fixture
def write_json(tmp_path):
    """Write an object to a JSON file under tmp_path and return the path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
