import pytest

from verse_matcher.exceptions import CorpusDataError, NotLoadedError
from verse_matcher.search import CorpusSearchService, flatten_corpus


def _corpus(*verses):
    """Build a nested corpus from (surah, ayah, arabic, english) tuples."""
    surahs = {}
    for surah, ayah, arabic, english in verses:
        surahs.setdefault(surah, []).append({"number": ayah, "arabic": arabic, "english": english})
    return {"surahs": [{"number": n, "ayahs": ayahs} for n, ayahs in surahs.items()]}


class TestLifecycle:

    def test_not_loaded_raises(self):
        service = CorpusSearchService()
        assert not service.is_data_loaded()
        assert service.get_verse_count() == 0
        with pytest.raises(NotLoadedError, match="load_data"):
            service.find_verse("mercy")

    def test_not_loaded_check_precedes_empty_query(self):
        with pytest.raises(NotLoadedError):
            CorpusSearchService().find_verse("")

    def test_load_counts_verses(self, search_service, sample_corpus):
        expected = sum(len(s["ayahs"]) for s in sample_corpus["surahs"])
        assert search_service.is_data_loaded()
        assert search_service.get_verse_count() == expected

    def test_reload_replaces_index(self, search_service):
        search_service.load_data(_corpus((2, 255, "الله لا إله إلا هو الحي القيوم", "God - there is no deity save Him")))
        assert search_service.get_verse_count() == 1
        assert search_service.find_verse("رحمن") == []
        assert search_service.find_verse("no deity save him")[0].ayah == 255

    def test_failed_reload_keeps_previous_index(self, search_service):
        count = search_service.get_verse_count()
        with pytest.raises(CorpusDataError):
            search_service.load_data({"surahs": "not a list"})
        assert search_service.get_verse_count() == count

    def test_load_file(self, tmp_path, write_json):
        service = CorpusSearchService()
        path = write_json("corpus.json", _corpus((1, 1, "بسم الله الرحمن الرحيم", "In the name of God")))
        assert service.load_file(path) == 1

    def test_load_missing_file(self, tmp_path):
        service = CorpusSearchService()
        with pytest.raises(CorpusDataError):
            service.load_file(tmp_path / "missing.json")
        assert not service.is_data_loaded()


class TestFindVerse:

    def test_arabic_fragment_finds_verse(self, search_service):
        results = search_service.find_verse("رحمن", 3)
        assert 0 < len(results) <= 3
        refs = [(r.surah, r.ayah) for r in results]
        assert (55, 1) in refs
        hit = results[refs.index((55, 1))]
        assert hit.arabic == "الرحمن"
        assert hit.confidence > 0

    def test_english_query(self, search_service):
        results = search_service.find_verse("Say: He is the One God")
        assert (results[0].surah, results[0].ayah) == (112, 1)
        assert results[0].confidence == 100.0

    def test_results_sorted_by_confidence(self, search_service):
        results = search_service.find_verse("the evil of", limit=10)
        confidences = [r.confidence for r in results]
        assert confidences == sorted(confidences, reverse=True)
        assert all(0 <= c <= 100 for c in confidences)

    def test_equal_scores_keep_corpus_order(self, search_service):
        # Every verse containing the fragment scores perfectly
        results = search_service.find_verse("رحمن", limit=10)
        assert [(r.surah, r.ayah) for r in results[:3]] == [(1, 1), (1, 3), (55, 1)]
        assert all(r.confidence == 100.0 for r in results[:3])
        assert all(r.confidence < 100.0 for r in results[3:])

    def test_match_position_not_penalized(self):
        service = CorpusSearchService()
        long_english = " ".join(["and they said that"] * 20) + " mercy"
        service.load_data(_corpus(
            (1, 1, "قل", long_english),
            (1, 2, "قل", "mercy and guidance"),
        ))
        results = service.find_verse("mercy", limit=-1)
        assert [(r.ayah, r.confidence) for r in results] == [(1, 100.0), (2, 100.0)]

    def test_limit(self, search_service):
        assert len(search_service.find_verse("the evil of", limit=1)) == 1
        assert search_service.find_verse("the evil of", limit=0) == []

    def test_default_limit_is_three(self, search_service):
        assert len(search_service.find_verse("the evil of")) == 3

    def test_negative_limit_returns_everything(self, search_service):
        assert len(search_service.find_verse("the evil of", limit=-1)) >= 4

    def test_blank_query(self, search_service):
        assert search_service.find_verse("") == []
        assert search_service.find_verse("   ") == []

    def test_single_character_is_too_short(self, search_service):
        assert search_service.find_verse("ا") == []

    def test_no_match(self, search_service):
        assert search_service.find_verse("zzzzqqqq") == []

    def test_confidence_rounded_to_two_decimals(self, search_service):
        for result in search_service.find_verse("Sustainer of the dawn", limit=5):
            assert result.confidence == round(result.confidence, 2)


class TestArabicNormalization:

    def test_diacritics_ignored_when_enabled(self, sample_corpus):
        service = CorpusSearchService(normalize_arabic=True)
        service.load_data(sample_corpus)
        results = service.find_verse("الرَّحْمَٰنِ", limit=3)
        assert {(r.surah, r.ayah) for r in results} == {(1, 1), (1, 3), (55, 1)}
        assert all(r.confidence == 100.0 for r in results)

    def test_alef_variants(self, sample_corpus):
        plain = CorpusSearchService()
        plain.load_data(sample_corpus)
        normalizing = CorpusSearchService(normalize_arabic=True)
        normalizing.load_data(sample_corpus)

        plain_hit = plain.find_verse("اياك نعبد")[0]
        normalized_hit = normalizing.find_verse("اياك نعبد")[0]
        assert (plain_hit.surah, plain_hit.ayah) == (1, 5)
        assert (normalized_hit.surah, normalized_hit.ayah) == (1, 5)
        assert plain_hit.confidence < normalized_hit.confidence == 100.0

    def test_results_carry_original_text(self, sample_corpus):
        service = CorpusSearchService(normalize_arabic=True)
        service.load_data(sample_corpus)
        hit = service.find_verse("اياك نعبد")[0]
        assert hit.arabic == "إياك نعبد وإياك نستعين"


class TestMalformedCorpus:

    @pytest.mark.parametrize("corpus", [
        None,
        [],
        {},
        {"surahs": None},
        {"surahs": [{"number": 1}]},
        {"surahs": [{"number": 1, "ayahs": ["text"]}]},
        {"surahs": [{"number": 1, "ayahs": [{"number": 1, "arabic": "الحمد لله"}]}]},
        {"surahs": [{"number": 0, "ayahs": [{"number": 1, "arabic": "الحمد", "english": "Praise"}]}]},
        {"surahs": [{"number": 1, "ayahs": [{"number": 1, "arabic": 12, "english": "Praise"}]}]},
    ])
    def test_rejected(self, corpus):
        with pytest.raises(CorpusDataError):
            CorpusSearchService().load_data(corpus)

    def test_empty_corpus(self):
        with pytest.raises(CorpusDataError, match="no verses"):
            flatten_corpus({"surahs": [{"number": 1, "ayahs": []}]})

    def test_error_context(self):
        bad = {"surahs": [
            {"number": 1, "ayahs": [{"number": 1, "arabic": "a", "english": "b"}]},
            {"number": 2, "ayahs": [{"number": 1, "arabic": "c"}]},
        ]}
        with pytest.raises(CorpusDataError) as exc_info:
            flatten_corpus(bad)
        assert exc_info.value.context == {"surah_index": 1, "ayah_index": 0}


class TestConfiguration:

    def test_weights_are_normalized(self):
        service = CorpusSearchService(weights={"arabic": 2, "english": 2})
        assert service.weights == {"arabic": 0.5, "english": 0.5}

    def test_zero_weights_rejected(self):
        with pytest.raises(ValueError):
            CorpusSearchService(weights={"arabic": 0, "english": 0})
