"""Primary-then-fallback lookup across dictionary adapters.

Fallbacks are tried one at a time in configured order; the first success
wins.  On total failure only the most recent error is raised, so earlier
attempts are visible in the warning log but not in the exception.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from wotd.adapters import registry
from wotd.config import Settings
from wotd.errors import DictionaryError
from wotd.models import FetchResult

log = logging.getLogger("wotd.adapters")

# Failures that hand the lookup over to the next adapter
ADAPTER_FAILURES = (DictionaryError, httpx.HTTPError)


async def fetch_with_fallback(
    word: str,
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    **options: Any,
) -> FetchResult:
    settings = settings or Settings()
    primary = registry.get_adapter(settings, transport=transport)
    try:
        response = await primary.fetch_word_data(word, **options)
        return FetchResult(response=response, adapter_name=primary.name())
    except ADAPTER_FAILURES as primary_error:
        chain = settings.fallback_chain()
        if not chain:
            raise
        last_error: BaseException = primary_error

    previous = primary.name()
    for fallback_name in chain:
        log.warning(
            "Adapter failed, trying fallback: primary=%s previous=%s fallback=%s word=%s error=%s",
            primary.name(), previous, fallback_name, word, last_error,
        )
        try:
            fallback = registry.get_adapter_by_name(fallback_name, settings, transport=transport)
            response = await fallback.fetch_word_data(word, **options)
            return FetchResult(response=response, adapter_name=fallback.name())
        except ADAPTER_FAILURES as e:
            last_error = e
            previous = fallback_name

    raise last_error
