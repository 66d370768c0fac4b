"""Tests for the on-disk word store."""
from __future__ import annotations

import json
import logging

import pytest

from wotd.errors import EntryExistsError
from wotd.models import Definition, WordData


def _word(word: str, date: str) -> WordData:
    return WordData(word=word, date=date, adapter="wiktionary",
                    data=[Definition(text=f"{word} text", part_of_speech="noun")])


class TestWordStore:
    def test_path_layout(self, tmp_store):
        assert tmp_store.path_for("20240116") == tmp_store.words_dir / "2024" / "20240116.json"

    def test_save_and_get(self, tmp_store, sample_word_data):
        path = tmp_store.save(sample_word_data)
        assert path.exists()
        assert tmp_store.get("20240116") == sample_word_data

    def test_saved_json_shape(self, tmp_store, sample_word_data):
        path = tmp_store.save(sample_word_data)
        raw = json.loads(path.read_text())
        assert set(raw) == {"word", "date", "adapter", "preserveCase", "data"}
        assert raw["data"][0]["attributionText"] == "from The American Heritage® Dictionary"
        assert "®" in path.read_text()

    def test_get_missing(self, tmp_store):
        assert tmp_store.get("20240101") is None

    def test_save_refuses_overwrite(self, tmp_store, sample_word_data):
        tmp_store.save(sample_word_data)
        with pytest.raises(EntryExistsError):
            tmp_store.save(sample_word_data)

    def test_save_overwrite(self, tmp_store, sample_word_data):
        tmp_store.save(sample_word_data)
        replacement = _word("transient", "20240116")
        tmp_store.save(replacement, overwrite=True)
        assert tmp_store.get("20240116").word == "transient"

    def test_all_words_newest_first(self, tmp_store):
        for word, date in [("a", "20231231"), ("b", "20240201"), ("c", "20240115")]:
            tmp_store.save(_word(word, date))
        assert [w.date for w in tmp_store.all_words()] == ["20240201", "20240115", "20231231"]

    def test_all_words_missing_dir(self, tmp_store, caplog):
        with caplog.at_level(logging.WARNING, logger="wotd.store"):
            assert tmp_store.all_words() == []
        assert "does not exist" in caplog.text

    def test_all_words_skips_unreadable(self, tmp_store, caplog):
        tmp_store.save(_word("good", "20240101"))
        bad = tmp_store.path_for("20240102")
        bad.write_text("{not json")
        with caplog.at_level(logging.ERROR, logger="wotd.store"):
            words = tmp_store.all_words()
        assert [w.word for w in words] == ["good"]
        assert "20240102.json" in caplog.text

    def test_date_filled_from_filename(self, tmp_store):
        path = tmp_store.path_for("20240105")
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"word": "legacy", "data": []}))
        assert tmp_store.all_words()[0].date == "20240105"

    def test_find_existing_word_case_insensitive(self, tmp_store):
        tmp_store.save(_word("Serendipity", "20240110"))
        found = tmp_store.find_existing_word("serendipity")
        assert found is not None
        assert found.date == "20240110"
        assert tmp_store.find_existing_word("luck") is None
