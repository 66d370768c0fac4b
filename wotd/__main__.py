"""CLI entry point for the word-of-the-day dictionary tools.

Usage:
  python -m wotd lookup <word> [--adapter NAME] [--limit N]
  python -m wotd add <word> [YYYYMMDD] [--overwrite] [--preserve-case]
  python -m wotd regenerate <YYYYMMDD>
  python -m wotd regenerate --all [--dry-run] [--timeout MS] [--rate-limit-timeout MS]
                               [--batch-size N] [--batch-timeout MS]
  python -m wotd serve [--port PORT] [--host HOST]
"""
from __future__ import annotations

import asyncio
import json
import logging
import sys

COMMANDS = "lookup, add, regenerate, serve"


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")
    args = sys.argv[1:]
    command = args[0] if args else ""

    if command == "lookup":
        _lookup(args[1:])
    elif command == "add":
        _add(args[1:])
    elif command == "regenerate":
        _regenerate(args[1:])
    elif command == "serve":
        _serve(args[1:])
    else:
        print(f"Unknown command: {command}" if command else __doc__)
        print(f"Commands: {COMMANDS}")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str | None) -> str | None:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _positionals(args: list[str], valued_flags: tuple[str, ...] = ()) -> list[str]:
    out: list[str] = []
    skip = False
    for a in args:
        if skip:
            skip = False
            continue
        if a in valued_flags:
            skip = True
            continue
        if a.startswith("--"):
            continue
        out.append(a)
    return out


def _lookup(args: list[str]):
    from wotd.adapters.fallback import fetch_with_fallback
    from wotd.adapters.registry import get_adapter_by_name
    from wotd.config import load_settings
    from wotd.errors import DictionaryError

    words = _positionals(args, ("--adapter", "--limit"))
    if not words:
        print("Usage: python -m wotd lookup <word> [--adapter NAME] [--limit N]")
        sys.exit(1)
    word = words[0]
    adapter_name = _parse_flag(args, "--adapter", None)
    limit = _parse_flag(args, "--limit", None)
    options = {"limit": int(limit)} if limit else {}

    settings = load_settings()
    try:
        if adapter_name:
            adapter = get_adapter_by_name(adapter_name, settings)
            response = asyncio.run(adapter.fetch_word_data(word, **options))
            used = adapter.name()
        else:
            result = asyncio.run(fetch_with_fallback(word, settings, **options))
            response, used = result.response, result.adapter_name
    except DictionaryError as e:
        print(f"Lookup failed: {e}")
        sys.exit(1)

    print(f"{response.word} ({used}, {len(response.definitions)} definitions)")
    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))


def _add(args: list[str]):
    from wotd.config import load_settings
    from wotd.entries import create_word_entry
    from wotd.errors import DictionaryError, EntryExistsError, WordNotFoundError
    from wotd.store import WordStore

    positionals = _positionals(args)
    if not positionals:
        print("Usage: python -m wotd add <word> [YYYYMMDD] [--overwrite] [--preserve-case]")
        sys.exit(1)
    word = positionals[0]
    date = positionals[1] if len(positionals) > 1 else None

    settings = load_settings()
    store = WordStore(settings.words_dir)
    try:
        entry = asyncio.run(create_word_entry(
            word, settings, store,
            date=date,
            overwrite="--overwrite" in args,
            preserve_case="--preserve-case" in args,
        ))
    except WordNotFoundError as e:
        print(f"Word not found in dictionary: {e}")
        sys.exit(1)
    except (DictionaryError, EntryExistsError, ValueError) as e:
        print(f"Failed to add word: {e}")
        sys.exit(1)

    print(f"Added {entry.word} for {entry.date} via {entry.adapter} ({len(entry.data)} definitions)")
    print(f"  {store.path_for(entry.date)}")


def _regenerate(args: list[str]):
    from wotd.config import load_settings
    from wotd.entries import (
        BATCH_DELAY,
        BATCH_SIZE,
        RATE_LIMIT_BACKOFF,
        REQUEST_DELAY,
        regenerate_all_words,
        regenerate_word_entry,
    )
    from wotd.errors import DictionaryError
    from wotd.store import WordStore

    settings = load_settings()
    store = WordStore(settings.words_dir)

    if "--all" in args:
        timeout_ms = int(_parse_flag(args, "--timeout", str(int(REQUEST_DELAY * 1000))))
        rate_limit_ms = int(_parse_flag(args, "--rate-limit-timeout", str(int(RATE_LIMIT_BACKOFF * 1000))))
        batch_size = int(_parse_flag(args, "--batch-size", str(BATCH_SIZE)))
        batch_ms = int(_parse_flag(args, "--batch-timeout", str(int(BATCH_DELAY * 1000))))
        dry_run = "--dry-run" in args
        report = asyncio.run(regenerate_all_words(
            settings, store,
            dry_run=dry_run,
            delay=timeout_ms / 1000,
            rate_limit_delay=rate_limit_ms / 1000,
            batch_size=batch_size,
            batch_delay=batch_ms / 1000,
        ))
        if dry_run:
            print(f"Dry run: {len(report.planned)} entries would be regenerated")
            return
        print(f"Regenerated {len(report.succeeded)}/{len(report.planned)} entries")
        if report.failed:
            print(f"  Failed: {', '.join(report.failed)}")
            sys.exit(1)
        return

    positionals = _positionals(args)
    if not positionals:
        print("Usage: python -m wotd regenerate <YYYYMMDD> | --all [--dry-run] [--timeout MS] "
              "[--rate-limit-timeout MS] [--batch-size N] [--batch-timeout MS]")
        sys.exit(1)

    try:
        entry = asyncio.run(regenerate_word_entry(positionals[0], settings, store))
    except (DictionaryError, FileNotFoundError) as e:
        print(f"Failed to regenerate: {e}")
        sys.exit(1)
    print(f"Regenerated {entry.word} for {entry.date} via {entry.adapter} ({len(entry.data)} definitions)")


def _serve(args: list[str]):
    import uvicorn

    port = int(_parse_flag(args, "--port", "8765"))
    host = _parse_flag(args, "--host", "127.0.0.1")
    print(f"Starting dictionary service on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run("wotd.app:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
