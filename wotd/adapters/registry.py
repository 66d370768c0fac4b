from __future__ import annotations

import logging
from enum import Enum

import httpx

from wotd.adapters.base import DictionaryAdapter
from wotd.adapters.merriam_webster import MerriamWebsterAdapter
from wotd.adapters.wiktionary import WiktionaryAdapter
from wotd.adapters.wordnik import WordnikAdapter
from wotd.config import Settings
from wotd.errors import ConfigurationError

log = logging.getLogger("wotd.adapters")

DEFAULT_ADAPTER = "wordnik"


class AdapterName(str, Enum):
    WORDNIK = "wordnik"
    MERRIAM_WEBSTER = "merriam-webster"
    WIKTIONARY = "wiktionary"


_ADAPTERS: dict[AdapterName, type[DictionaryAdapter]] = {
    AdapterName.WORDNIK: WordnikAdapter,
    AdapterName.MERRIAM_WEBSTER: MerriamWebsterAdapter,
    AdapterName.WIKTIONARY: WiktionaryAdapter,
}


def get_adapter_by_name(
    name: str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DictionaryAdapter:
    """Resolve a canonical adapter name (case-insensitive) to an adapter."""
    try:
        key = AdapterName(name.strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unknown adapter: {name}") from None
    return _ADAPTERS[key](settings, transport=transport)


def get_adapter(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DictionaryAdapter:
    """Return the configured primary adapter (Wordnik when unset)."""
    settings = settings or Settings()
    name = settings.dictionary_adapter or DEFAULT_ADAPTER
    log.info("Using dictionary adapter: %s", name)
    return get_adapter_by_name(name, settings, transport=transport)
