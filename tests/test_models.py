"""Tests for data models."""
from __future__ import annotations

from wotd.models import Definition, DisplayMeta, WordData, WordDisplay


class TestDefinition:
    def test_to_dict_uses_camel_case(self):
        d = Definition(text="brief", part_of_speech="adjective", attribution_text="from X",
                       source_dictionary="ahd-5", source_url="https://example.com", id="A1")
        assert d.to_dict() == {
            "id": "A1",
            "partOfSpeech": "adjective",
            "text": "brief",
            "attributionText": "from X",
            "sourceDictionary": "ahd-5",
            "sourceUrl": "https://example.com",
        }

    def test_to_dict_omits_missing_optionals(self):
        d = Definition(text="brief", examples=[], synonyms=None)
        out = d.to_dict()
        assert "id" not in out
        assert "partOfSpeech" not in out
        assert "examples" not in out
        assert "synonyms" not in out

    def test_to_dict_keeps_lists(self):
        d = Definition(text="luck", examples=["e1"], synonyms=["fluke"], antonyms=["misfortune"])
        out = d.to_dict()
        assert out["examples"] == ["e1"]
        assert out["synonyms"] == ["fluke"]
        assert out["antonyms"] == ["misfortune"]

    def test_from_dict_roundtrip(self):
        d = Definition(text="t", part_of_speech="noun", examples=["e"], source_url="u", id="x")
        assert Definition.from_dict(d.to_dict()) == d

    def test_from_dict_legacy_list_text(self):
        d = Definition.from_dict({"text": ["part one", "part two"], "partOfSpeech": "noun"})
        assert d.text == ["part one", "part two"]
        assert d.attribution_text == ""


class TestWordData:
    def test_to_dict_skips_raw_data(self, sample_word_data, sample_response):
        sample_word_data.raw_data = sample_response
        out = sample_word_data.to_dict()
        assert "rawData" not in out
        assert out["word"] == "ephemeral"
        assert out["adapter"] == "wordnik"
        assert out["preserveCase"] is False
        assert out["data"][0]["partOfSpeech"] == "adjective"

    def test_from_dict_roundtrip(self, sample_word_data):
        assert WordData.from_dict(sample_word_data.to_dict()) == sample_word_data

    def test_from_dict_missing_data(self):
        wd = WordData.from_dict({"word": "x", "date": "20240101"})
        assert wd.data == []
        assert wd.adapter == ""
        assert wd.preserve_case is False


class TestWordDisplay:
    def test_empty(self):
        assert WordDisplay.empty().to_dict() == {"partOfSpeech": "", "definition": "", "meta": None}

    def test_to_dict(self):
        display = WordDisplay("noun", "a thing", DisplayMeta("from Wiktionary", None, ""))
        assert display.to_dict() == {
            "partOfSpeech": "noun",
            "definition": "a thing",
            "meta": {"attributionText": "from Wiktionary", "sourceDictionary": None, "sourceUrl": ""},
        }
