"""Base part-of-speech categories and per-adapter normalization.

Adapters normalize raw POS strings to one of the base categories at fetch
time.  Anything that is neither a base value nor listed in the adapter's
alias map is dropped (``None``), so "biographical name" and friends never
reach stored data.
"""
from __future__ import annotations

from collections.abc import Mapping

ADJECTIVE = "adjective"
ADVERB = "adverb"
ARTICLE = "article"
CONJUNCTION = "conjunction"
DETERMINER = "determiner"
INTERJECTION = "interjection"
NOUN = "noun"
PREPOSITION = "preposition"
PRONOUN = "pronoun"
VERB = "verb"

BASE_PARTS_OF_SPEECH = frozenset({
    ADJECTIVE, ADVERB, ARTICLE, CONJUNCTION, DETERMINER,
    INTERJECTION, NOUN, PREPOSITION, PRONOUN, VERB,
})


def is_base_part_of_speech(value: str) -> bool:
    return value in BASE_PARTS_OF_SPEECH


def normalize_pos(raw: str, alias_map: Mapping[str, str]) -> str | None:
    cleaned = raw.strip().lower()
    if is_base_part_of_speech(cleaned):
        return cleaned
    return alias_map.get(cleaned)
