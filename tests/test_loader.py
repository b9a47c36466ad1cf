import pytest

from verse_matcher.data.loader import (
    build_phrase_table,
    load_corpus_file,
    load_phrase_table,
    load_surahs,
)
from verse_matcher.exceptions import CorpusDataError, PhraseTableError


def _surah_records():
    return [
        {"number": n, "name": f"سورة {n}", "name_en": f"Surah {n}", "total_verses": 7}
        for n in range(1, 115)
    ]


class TestLoadSurahs:

    def test_bundled_metadata(self, surahs):
        assert len(surahs) == 114
        assert surahs[1].name_en == "Al-Fatiha"
        assert surahs[2].total_verses == 286
        assert sum(s.total_verses for s in surahs.values()) == 6236

    def test_missing_file(self, tmp_path):
        with pytest.raises(PhraseTableError, match="not found"):
            load_surahs(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PhraseTableError, match="Invalid JSON"):
            load_surahs(path)

    def test_not_a_list(self, write_json):
        with pytest.raises(PhraseTableError, match="must be a list"):
            load_surahs(write_json("surahs.json", {"1": "Al-Fatiha"}))

    def test_incomplete_coverage(self, write_json):
        with pytest.raises(PhraseTableError, match="1-114"):
            load_surahs(write_json("surahs.json", _surah_records()[:-1]))

    def test_duplicate_surah(self, write_json):
        records = _surah_records()
        records.append(dict(records[0]))
        with pytest.raises(PhraseTableError, match="Duplicate") as exc_info:
            load_surahs(write_json("surahs.json", records))
        assert exc_info.value.entry_index == 114

    def test_invalid_record(self, write_json):
        records = _surah_records()
        records[5]["total_verses"] = 0
        with pytest.raises(PhraseTableError) as exc_info:
            load_surahs(write_json("surahs.json", records))
        assert exc_info.value.entry_index == 5


class TestPhraseTable:

    def test_bundled_table_is_normalized_and_ordered(self, phrases):
        assert phrases[0].phrase == "bismillah"
        assert phrases[0].surah == 1 and phrases[0].ayah == 1
        arabic_entries = [p.phrase for p in phrases if p.surah == 1 and p.ayah == 1]
        assert "بسم الله الرحمن الرحيم" in arabic_entries

    def test_entries_reference_real_verses(self, phrases, surahs):
        for entry in phrases:
            assert entry.ayah <= surahs[entry.surah].total_verses

    def test_preserves_order(self, surahs):
        raw = [
            {"phrase": "Second", "surah": 2, "ayah": 1, "arabic_text": "الم"},
            {"phrase": "First", "surah": 1, "ayah": 1, "arabic_text": "بسم الله"},
        ]
        table = build_phrase_table(raw, surahs)
        assert [p.phrase for p in table] == ["second", "first"]

    def test_ayah_out_of_range(self, surahs):
        raw = [{"phrase": "too far", "surah": 1, "ayah": 8, "arabic_text": "..."}]
        with pytest.raises(PhraseTableError, match="out of range") as exc_info:
            build_phrase_table(raw, surahs)
        assert exc_info.value.entry_index == 0

    def test_surah_out_of_range(self, surahs):
        raw = [{"phrase": "nowhere", "surah": 115, "ayah": 1, "arabic_text": "..."}]
        with pytest.raises(PhraseTableError):
            build_phrase_table(raw, surahs)

    def test_phrase_empty_after_normalization(self, surahs):
        raw = [{"phrase": "?!", "surah": 1, "ayah": 1, "arabic_text": "..."}]
        with pytest.raises(PhraseTableError):
            build_phrase_table(raw, surahs)

    def test_entry_not_an_object(self, surahs):
        with pytest.raises(PhraseTableError, match="object"):
            build_phrase_table(["bismillah"], surahs)

    def test_load_from_file(self, write_json, surahs):
        path = write_json("phrases.json", [
            {"phrase": "Qul Huwa Allahu Ahad", "surah": 112, "ayah": 1, "arabic_text": "قل هو الله أحد"},
        ])
        table = load_phrase_table(path, surahs=surahs)
        assert len(table) == 1
        assert table[0].phrase == "qul huwa allahu ahad"


class TestLoadCorpusFile:

    def test_bundled_corpus(self, sample_corpus):
        numbers = [s["number"] for s in sample_corpus["surahs"]]
        assert 55 in numbers and 1 in numbers

    def test_missing_file(self, tmp_path):
        with pytest.raises(CorpusDataError, match="not found"):
            load_corpus_file(tmp_path / "missing.json")
