from unittest.mock import MagicMock

import pytest
import requests

from verse_matcher.api.quran_cloud import QuranCloudClient
from verse_matcher.exceptions import QuranAPIError


def _response(payload=None, status_code=200, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    return response


def _envelope(data):
    return {"code": 200, "status": "OK", "data": data}


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return QuranCloudClient(base_url="https://api.example.test/v1/", session=session)


SEARCH_DATA = {
    "count": 2,
    "matches": [
        {"number": 6222, "text": "Say: He is the One God", "numberInSurah": 1,
         "surah": {"number": 112, "englishName": "Al-Ikhlaas"},
         "edition": {"identifier": "en.asad"}},
        {"number": 6223, "text": "God the Eternal", "numberInSurah": 2,
         "surah": {"number": 112, "englishName": "Al-Ikhlaas"},
         "edition": {"identifier": "en.asad"}},
    ],
}


class TestSearch:

    def test_parses_matches_in_order(self, client, session):
        session.get.return_value = _response(_envelope(SEARCH_DATA))
        results = client.search("one god")
        assert [(r.surah, r.ayah) for r in results] == [(112, 1), (112, 2)]
        assert results[0].text == "Say: He is the One God"
        assert results[0].edition == "en.asad"

    def test_url_and_timeout(self, client, session):
        session.get.return_value = _response(_envelope(SEARCH_DATA))
        client.search("one god", surah=112, edition="en.sahih")
        session.get.assert_called_once_with(
            "https://api.example.test/v1/search/one%20god/112/en.sahih", timeout=None
        )

    def test_sets_user_agent(self, session):
        QuranCloudClient(session=session)
        assert "User-Agent" in session.headers

    def test_not_found_means_no_results(self, client, session):
        session.get.return_value = _response({"code": 404, "data": "Not found"}, status_code=404)
        assert client.search("qwerty") == []

    def test_not_found_in_envelope(self, client, session):
        session.get.return_value = _response({"code": 404, "status": "NOT FOUND", "data": "Nothing"})
        assert client.search("qwerty") == []

    def test_server_error(self, client, session):
        session.get.return_value = _response({}, status_code=500)
        with pytest.raises(QuranAPIError) as exc_info:
            client.search("mercy")
        assert exc_info.value.status_code == 500

    def test_transport_error(self, client, session):
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(QuranAPIError, match="Request failed"):
            client.search("mercy")

    def test_invalid_json(self, client, session):
        session.get.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(QuranAPIError, match="Invalid JSON"):
            client.search("mercy")

    def test_malformed_matches(self, client, session):
        session.get.return_value = _response(_envelope({"matches": [{"text": "no numbers"}]}))
        with pytest.raises(QuranAPIError, match="Malformed"):
            client.search("mercy")


class TestFetchSurah:

    def test_merges_arabic_and_english(self, client, session):
        arabic = {
            "number": 112, "name": "سورة الإخلاص", "englishName": "Al-Ikhlaas",
            "englishNameTranslation": "Sincerity", "numberOfAyahs": 4, "revelationType": "Meccan",
            "ayahs": [
                {"number": 6222, "text": "قُلْ هُوَ اللَّهُ أَحَدٌ", "numberInSurah": 1},
                {"number": 6223, "text": "اللَّهُ الصَّمَدُ", "numberInSurah": 2},
            ],
        }
        english = {"ayahs": [
            {"number": 6222, "text": "Say: He is the One God", "numberInSurah": 1},
            {"number": 6223, "text": "God the Eternal", "numberInSurah": 2},
        ]}
        session.get.side_effect = [_response(_envelope(arabic)), _response(_envelope(english))]

        surah = client.fetch_surah(112)
        assert surah.name_translated == "Al-Ikhlaas"
        assert surah.total_ayahs == 4
        assert surah.ayahs[1].translation == "God the Eternal"
        assert surah.ayahs[1].global_number == 6223
        assert surah.ayahs[0].audio == "https://api.example.test/v1/ayah/6222/ar.alafasy"

    @pytest.mark.parametrize("number", [0, 115])
    def test_rejects_out_of_range(self, client, session, number):
        with pytest.raises(ValueError):
            client.fetch_surah(number)
        session.get.assert_not_called()


class TestFetchAyah:

    def test_english_edition_sets_translation(self, client, session):
        session.get.return_value = _response(_envelope({
            "number": 262, "text": "God - there is no deity save Him", "numberInSurah": 255,
            "surah": {"number": 2}, "edition": {"identifier": "en.asad"},
        }))
        ayah = client.fetch_ayah("2:255", edition="en.asad")
        assert (ayah.surah_number, ayah.number) == (2, 255)
        assert ayah.translation == ayah.text

    def test_editions(self, client, session):
        session.get.return_value = _response(_envelope([
            {"number": 1, "text": "بِسْمِ اللَّهِ", "numberInSurah": 1, "surah": {"number": 1},
             "edition": {"identifier": "quran-uthmani"}},
            {"number": 1, "text": "In the name of God", "numberInSurah": 1, "surah": {"number": 1},
             "edition": {"identifier": "en.asad"}},
        ]))
        ayahs = client.fetch_ayah_editions("1:1", ["quran-uthmani", "en.asad"])
        assert ayahs[0].translation == ""
        assert ayahs[1].translation == "In the name of God"
        assert session.get.call_args[0][0].endswith("ayah/1:1/editions/quran-uthmani,en.asad")


def test_list_surahs(client, session):
    session.get.return_value = _response(_envelope([
        {"number": 1, "name": "سُورَةُ ٱلْفَاتِحَةِ", "englishName": "Al-Faatiha",
         "englishNameTranslation": "The Opening"},
    ]))
    assert client.list_surahs() == [{
        "number": 1, "name": "سُورَةُ ٱلْفَاتِحَةِ",
        "name_translated": "Al-Faatiha", "name_english": "The Opening",
    }]


def test_unencodable_keyword(client, session):
    with pytest.raises(QuranAPIError, match="cannot be encoded"):
        client.search("\ud800 unknown words")
    session.get.assert_not_called()
