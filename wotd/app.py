"""FastAPI application: dictionary lookups and stored word entries as JSON."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException

from wotd.adapters.fallback import fetch_with_fallback
from wotd.adapters.registry import get_adapter_by_name
from wotd.config import Settings, load_settings
from wotd.entries import is_valid_date
from wotd.errors import (
    ConfigurationError,
    DictionaryError,
    RateLimitError,
    WordNotFoundError,
)
from wotd.store import WordStore

app = FastAPI(title="Word of the Day")

log = logging.getLogger("wotd.app")

# Global state (initialized on startup)
_settings: Settings | None = None
_store: WordStore | None = None


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def get_store() -> WordStore:
    assert _store is not None
    return _store


@app.on_event("startup")
async def startup():
    global _settings, _store
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _store = WordStore(_settings.words_dir)


def _http_error(e: DictionaryError) -> HTTPException:
    if isinstance(e, WordNotFoundError):
        return HTTPException(404, str(e))
    if isinstance(e, RateLimitError):
        return HTTPException(429, str(e))
    if isinstance(e, ConfigurationError):
        return HTTPException(500, str(e))
    return HTTPException(502, str(e))


@app.get("/health")
async def health():
    s = get_settings()
    return {
        "status": "ok",
        "adapter": s.dictionary_adapter,
        "fallback": s.fallback_chain(),
    }


@app.get("/api/lookup/{word}")
async def api_lookup(word: str, adapter: str | None = None, limit: int | None = None):
    s = get_settings()
    options = {"limit": limit} if limit is not None else {}
    try:
        if adapter:
            a = get_adapter_by_name(adapter, s)
            response = await a.fetch_word_data(word, **options)
            adapter_name = a.name()
        else:
            result = await fetch_with_fallback(word, s, **options)
            response, adapter_name = result.response, result.adapter_name
    except DictionaryError as e:
        log.warning("Lookup failed for %r: %s", word, e)
        raise _http_error(e)
    return {"adapter": adapter_name, "response": response.to_dict()}


@app.get("/api/words/{date}")
async def api_word(date: str):
    if not is_valid_date(date):
        raise HTTPException(400, "Date must be YYYYMMDD")
    word_data = get_store().get(date)
    if word_data is None:
        raise HTTPException(404, f"No word for {date}")

    s = get_settings()
    try:
        adapter = get_adapter_by_name(word_data.adapter or s.dictionary_adapter, s)
    except ConfigurationError as e:
        raise _http_error(e)
    return {
        "word": word_data.word,
        "date": word_data.date,
        "adapter": word_data.adapter,
        **adapter.transform_word_data(word_data).to_dict(),
    }
