from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "dictionary_adapter": "wordnik",
    "dictionary_fallback": "",
    "wordnik_api_key": "",
    "wordnik_api_url": "https://api.wordnik.com/v4",
    "wordnik_website_url": "https://www.wordnik.com",
    "wordnik_limit": 10,
    "merriam_webster_api_key": "",
    "merriam_webster_api_url": "https://dictionaryapi.com/api/v3/references",
    "merriam_webster_dictionary": "collegiate",
    "wiktionary_api_url": "https://api.dictionaryapi.dev/api/v2/entries/en",
    "source_dir": "demo",
}

# Environment variable -> Settings field
ENV_VARS = {
    "DICTIONARY_ADAPTER": "dictionary_adapter",
    "DICTIONARY_FALLBACK": "dictionary_fallback",
    "WORDNIK_API_KEY": "wordnik_api_key",
    "WORDNIK_API_URL": "wordnik_api_url",
    "WORDNIK_WEBSITE_URL": "wordnik_website_url",
    "MERRIAM_WEBSTER_API_KEY": "merriam_webster_api_key",
    "MERRIAM_WEBSTER_API_URL": "merriam_webster_api_url",
    "MERRIAM_WEBSTER_DICTIONARY": "merriam_webster_dictionary",
    "WIKTIONARY_API_URL": "wiktionary_api_url",
    "SOURCE_DIR": "source_dir",
}


@dataclass
class Settings:
    dictionary_adapter: str = DEFAULTS["dictionary_adapter"]
    dictionary_fallback: str = DEFAULTS["dictionary_fallback"]
    wordnik_api_key: str = DEFAULTS["wordnik_api_key"]
    wordnik_api_url: str = DEFAULTS["wordnik_api_url"]
    wordnik_website_url: str = DEFAULTS["wordnik_website_url"]
    wordnik_limit: int = DEFAULTS["wordnik_limit"]
    merriam_webster_api_key: str = DEFAULTS["merriam_webster_api_key"]
    merriam_webster_api_url: str = DEFAULTS["merriam_webster_api_url"]
    merriam_webster_dictionary: str = DEFAULTS["merriam_webster_dictionary"]
    wiktionary_api_url: str = DEFAULTS["wiktionary_api_url"]
    source_dir: str = DEFAULTS["source_dir"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def words_dir(self) -> Path:
        return self.project_root / "data" / self.source_dir / "words"

    def fallback_chain(self) -> list[str]:
        """Ordered fallback adapter names; ``none`` or blank means no fallback."""
        raw = (self.dictionary_fallback or "").strip()
        if not raw or raw.lower() == "none":
            return []
        return [name.strip() for name in raw.split(",") if name.strip()]

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from config.json, then overlay non-empty environment variables."""
    raw: dict = {}
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
    known = {f.name for f in fields(Settings)}
    values = {k: v for k, v in raw.items() if k in known}

    env = os.environ if environ is None else environ
    for var, field_name in ENV_VARS.items():
        value = env.get(var)
        if value:
            values[field_name] = value

    if "wordnik_limit" in values:
        values["wordnik_limit"] = int(values["wordnik_limit"])
    return Settings(**values)
