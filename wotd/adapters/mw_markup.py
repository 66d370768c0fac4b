"""Merriam-Webster inline markup and sense-tree helpers.

MW text embeds tokens such as ``{bc}``, ``{it}...{/it}`` and
``{sx|word||}``.  Examples live several levels down each entry::

    def[] -> sseq[] -> sense group[] -> [tag, data]

where *tag* is one of ``sense``, ``sen``, ``bs`` (binding substitute,
``{"sense": data}``) or ``pseq`` (a list of further ``sense``/``sen`` items).
Each sense's ``dt`` list holds ``["vis", [{"t": ...}, ...]]`` tuples.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Any

log = logging.getLogger("wotd.merriam_webster")

_SUBSTITUTIONS: list[tuple[re.Pattern, str]] = [
    # {bc} has no closing pair, so it goes before the generic tag strip
    (re.compile(r"\{bc\}"), ": "),
    (re.compile(r"\{(?:it|wi|sc|b)\}(.*?)\{/(?:it|wi|sc|b)\}"), r"\1"),
    (re.compile(r"\{ldquo\}"), "“"),
    (re.compile(r"\{rdquo\}"), "”"),
    (re.compile(r"\{(?:sx|a_link|d_link|dxt)\|([^|}]*)[^}]*\}"), r"\1"),
    (re.compile(r"\{[^}]*\}"), ""),
]


def strip_markup(text: str) -> str:
    if not text or not isinstance(text, str):
        return text
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


SenseHandler = Callable[[Any], Iterator[dict]]


def _plain_sense(data: Any) -> Iterator[dict]:
    if isinstance(data, dict):
        yield data


def _binding_substitute(data: Any) -> Iterator[dict]:
    if isinstance(data, dict):
        yield from _plain_sense(data.get("sense"))


def _paragraph_sequence(data: Any) -> Iterator[dict]:
    for item in data if isinstance(data, list) else []:
        tag, inner = _split_item(item)
        if tag in _PSEQ_HANDLERS:
            yield from _PSEQ_HANDLERS[tag](inner)
        else:
            log.debug("Not following %r inside pseq", tag)


_PSEQ_HANDLERS: dict[str, SenseHandler] = {
    "sense": _plain_sense,
    "sen": _plain_sense,
}

SENSE_HANDLERS: dict[str, SenseHandler] = {
    "sense": _plain_sense,
    "sen": _plain_sense,
    "bs": _binding_substitute,
    "pseq": _paragraph_sequence,
}


def _split_item(item: Any) -> tuple[str | None, Any]:
    if isinstance(item, list) and len(item) >= 2 and isinstance(item[0], str):
        return item[0], item[1]
    return None, None


def iter_senses(entry: dict) -> Iterator[dict]:
    """Yield every sense dict reachable from an entry's ``def`` block."""
    for def_block in entry.get("def") or []:
        if not isinstance(def_block, dict):
            continue
        for sense_group in def_block.get("sseq") or []:
            for item in sense_group if isinstance(sense_group, list) else []:
                tag, data = _split_item(item)
                handler = SENSE_HANDLERS.get(tag) if tag else None
                if handler is None:
                    log.warning("Skipping unrecognized sense item %r in entry %s",
                                tag, (entry.get("meta") or {}).get("id", "?"))
                    continue
                yield from handler(data)


def _examples_from_dt(dt: Any) -> Iterator[str]:
    for chunk in dt if isinstance(dt, list) else []:
        tag, visuals = _split_item(chunk)
        if tag != "vis" or not isinstance(visuals, list):
            continue
        for vis in visuals:
            if not isinstance(vis, dict) or not isinstance(vis.get("t"), str):
                continue
            cleaned = strip_markup(vis["t"]).strip()
            if cleaned:
                yield cleaned


def extract_examples(entry: dict) -> list[str]:
    if not entry.get("def"):
        return []
    examples: list[str] = []
    for sense in iter_senses(entry):
        examples.extend(_examples_from_dt(sense.get("dt")))
        sdsense = sense.get("sdsense")
        if isinstance(sdsense, dict):
            examples.extend(_examples_from_dt(sdsense.get("dt")))
    return examples
