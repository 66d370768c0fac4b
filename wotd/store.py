"""Word entries on disk: one JSON file per day under ``<words_dir>/<YYYY>/<YYYYMMDD>.json``."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from wotd.errors import EntryExistsError
from wotd.models import WordData

log = logging.getLogger("wotd.store")


class WordStore:
    def __init__(self, words_dir: Path):
        self.words_dir = Path(words_dir)

    def path_for(self, date: str) -> Path:
        return self.words_dir / date[:4] / f"{date}.json"

    def get(self, date: str) -> WordData | None:
        path = self.path_for(date)
        if not path.exists():
            return None
        return WordData.from_dict(json.loads(path.read_text()))

    def all_words(self) -> list[WordData]:
        """Every readable entry, newest first."""
        if not self.words_dir.exists():
            log.warning("Word directory does not exist: %s", self.words_dir)
            return []

        words: list[WordData] = []
        for path in self.words_dir.glob("[0-9][0-9][0-9][0-9]/*.json"):
            try:
                word = WordData.from_dict(json.loads(path.read_text()))
            except (OSError, ValueError) as e:
                log.error("Failed to read word file %s: %s", path, e)
                continue
            if not word.date:
                word.date = path.stem
            words.append(word)
        return sorted(words, key=lambda w: w.date, reverse=True)

    def find_existing_word(self, word: str) -> WordData | None:
        lowered = word.lower()
        for existing in self.all_words():
            if existing.word.lower() == lowered:
                return existing
        return None

    def save(self, word_data: WordData, overwrite: bool = False) -> Path:
        path = self.path_for(word_data.date)
        if path.exists() and not overwrite:
            raise EntryExistsError(f"Word already exists for date {word_data.date}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(word_data.to_dict(), indent=4, ensure_ascii=False) + "\n")
        log.info("Word entry saved: %s (%s)", word_data.word, word_data.date)
        return path
