"""Create and regenerate the daily word entries."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime

import httpx

from wotd.adapters.fallback import fetch_with_fallback
from wotd.adapters.registry import get_adapter_by_name
from wotd.config import Settings
from wotd.errors import DictionaryError, EntryExistsError, RateLimitError
from wotd.models import WordData
from wotd.store import WordStore
from wotd.transformers import transform_to_word_data

log = logging.getLogger("wotd.entries")


def is_valid_date(date: str) -> bool:
    if not isinstance(date, str) or len(date) != 8 or not date.isdigit():
        return False
    try:
        datetime.strptime(date, "%Y%m%d")
    except ValueError:
        return False
    return True


def today_yyyymmdd() -> str:
    return datetime.now().strftime("%Y%m%d")


def _has_definition_text(word_data: WordData) -> bool:
    return any(isinstance(d.text, str) and d.text.strip() for d in word_data.data)


async def create_word_entry(
    word: str,
    settings: Settings,
    store: WordStore,
    *,
    date: str | None = None,
    overwrite: bool = False,
    preserve_case: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WordData:
    """Fetch *word* (with fallback) and persist it as the entry for *date*.

    The word is lowercased unless *preserve_case* is set.  The date defaults
    to today and may not be in the future; a date that already has an entry
    is only replaced with *overwrite*, and a word stored under another date
    is always rejected.
    """
    trimmed = (word or "").strip()
    if not trimmed:
        raise ValueError("Word is required")
    final_word = trimmed if preserve_case else trimmed.lower()

    target_date = date or today_yyyymmdd()
    if not is_valid_date(target_date):
        raise ValueError(f"Invalid date format: {target_date} (expected YYYYMMDD)")
    if target_date > today_yyyymmdd():
        raise ValueError(f"Cannot add words for future dates: {target_date}")

    existing = store.get(target_date)
    if existing is not None and not overwrite:
        raise EntryExistsError(f"Word already exists for date {target_date}: {existing.word}")

    duplicate = store.find_existing_word(final_word)
    if duplicate is not None and duplicate.date != target_date:
        raise EntryExistsError(f'Word "{final_word}" already exists for date {duplicate.date}')

    result = await fetch_with_fallback(final_word, settings, transport=transport)
    word_data = transform_to_word_data(result.adapter_name, result.response, target_date)
    word_data.word = final_word
    word_data.preserve_case = preserve_case

    if not _has_definition_text(word_data):
        raise DictionaryError(f"No valid definitions found for word: {final_word}", adapter=result.adapter_name)

    store.save(word_data, overwrite=overwrite)
    log.info("Word entry created: %s (%s) via %s", final_word, target_date, result.adapter_name)
    return word_data


async def regenerate_word_entry(
    date: str,
    settings: Settings,
    store: WordStore,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WordData:
    """Re-fetch a stored entry with the adapter that produced it and replace its data."""
    existing = store.get(date)
    if existing is None:
        raise FileNotFoundError(f"No word entry for date {date}")

    adapter = get_adapter_by_name(existing.adapter or settings.dictionary_adapter, settings, transport=transport)
    response = await adapter.fetch_word_data(existing.word)
    word_data = adapter.transform_to_word_data(response, date)
    word_data.word = existing.word
    word_data.preserve_case = existing.preserve_case

    if not _has_definition_text(word_data):
        raise DictionaryError(f"No valid definitions found for word: {existing.word}", adapter=adapter.name())

    store.save(word_data, overwrite=True)
    log.info("Regenerated %s (%s) via %s: %d definitions",
             existing.word, date, adapter.name(), len(word_data.data))
    return word_data


# Pacing for batch regeneration, in seconds
REQUEST_DELAY = 1.0
RATE_LIMIT_BACKOFF = 65.0
BATCH_SIZE = 4
BATCH_DELAY = 10.0
MAX_RATE_LIMIT_RETRIES = 3


@dataclass
class RegenerationReport:
    planned: list[str] = field(default_factory=list)
    succeeded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


async def _regenerate_with_backoff(
    date: str,
    settings: Settings,
    store: WordStore,
    rate_limit_delay: float,
    max_retries: int,
    transport: httpx.AsyncBaseTransport | None,
) -> WordData:
    attempt = 0
    while True:
        try:
            return await regenerate_word_entry(date, settings, store, transport=transport)
        except RateLimitError:
            if attempt >= max_retries:
                raise
            attempt += 1
            log.info("Rate limited on %s, waiting %.0fs (attempt %d/%d)",
                     date, rate_limit_delay, attempt, max_retries)
            await asyncio.sleep(rate_limit_delay)


async def regenerate_all_words(
    settings: Settings,
    store: WordStore,
    *,
    dry_run: bool = False,
    delay: float = REQUEST_DELAY,
    rate_limit_delay: float = RATE_LIMIT_BACKOFF,
    batch_size: int = BATCH_SIZE,
    batch_delay: float = BATCH_DELAY,
    max_retries: int = MAX_RATE_LIMIT_RETRIES,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RegenerationReport:
    """Regenerate every stored entry, one lookup at a time.

    Lookups are spaced by *delay*, with a longer *batch_delay* pause after
    every *batch_size* words.  A rate-limited lookup waits *rate_limit_delay*
    and is retried up to *max_retries* times.  Other failures are logged and
    the run continues with the next word.
    """
    words = store.all_words()
    report = RegenerationReport(planned=[w.date for w in words])
    log.info("Found %d word entries to regenerate", len(words))
    if dry_run:
        for i, w in enumerate(words, 1):
            log.info("  %d. %s (%s)", i, w.word, w.date)
        return report

    for i, w in enumerate(words):
        if i > 0:
            if batch_size > 0 and i % batch_size == 0:
                log.info("Completed batch %d, pausing %.0fs", i // batch_size, batch_delay)
                await asyncio.sleep(batch_delay)
            else:
                await asyncio.sleep(delay)

        log.info("Regenerating %d/%d: %s", i + 1, len(words), w.word)
        try:
            await _regenerate_with_backoff(w.date, settings, store, rate_limit_delay, max_retries, transport)
        except (DictionaryError, httpx.HTTPError) as e:
            log.error("Failed to regenerate %s (%s): %s", w.word, w.date, e)
            report.failed.append(w.date)
            continue
        report.succeeded.append(w.date)

    log.info("Regeneration complete: %d succeeded, %d failed",
             len(report.succeeded), len(report.failed))
    return report
