from __future__ import annotations

import html
import logging
import re
from typing import Any
from urllib.parse import quote

from wotd.adapters.base import DictionaryAdapter
from wotd.adapters.http import (
    adapter_get,
    parse_json_response,
    raise_for_http_error,
    raise_invalid_response,
    raise_word_not_found,
)
from wotd.errors import ConfigurationError, WordNotFoundError
from wotd.models import Definition, DictionaryResponse, ResponseMeta
from wotd.parts_of_speech import normalize_pos

log = logging.getLogger("wotd.wordnik")

LABEL = "Wordnik"

POS_MAP = {
    "auxiliary-verb": "verb",
    "intransitive verb": "verb",
    "transitive verb": "verb",
    "phrasal verb": "verb",
    "proper-noun": "noun",
    "noun-plural": "noun",
    "proper noun": "noun",
    "noun plural": "noun",
}

XREF_RE = re.compile(r"<xref[^>]*>(.*?)</xref>")

RATE_LIMIT_HEADERS = (
    "x-ratelimit-remaining-minute",
    "x-ratelimit-remaining-hour",
    "x-ratelimit-limit-minute",
    "x-ratelimit-limit-hour",
)


def wordnik_word_url(word: str, website_url: str) -> str:
    if not website_url:
        raise ConfigurationError("WORDNIK_WEBSITE_URL environment variable is required", adapter="wordnik")
    return f"{website_url.rstrip('/')}/words/{quote(word.lower(), safe='')}"


def process_cross_references(text: str, website_url: str) -> str:
    """Turn ``<xref>word</xref>`` tags into links to the word's Wordnik page."""
    if not text or not isinstance(text, str):
        return text

    def _link(m: re.Match) -> str:
        word = m.group(1).strip()
        url = wordnik_word_url(word, website_url)
        return f'<a href="{url}" target="_blank" rel="noopener noreferrer" class="xref-link">{word}</a>'

    return XREF_RE.sub(_link, text)


def process_wordnik_html(text: str, website_url: str, preserve_xrefs: bool = True) -> str:
    if not isinstance(text, str):
        return text
    if preserve_xrefs:
        text = process_cross_references(text, website_url)
    else:
        text = XREF_RE.sub(r"\1", text)
    if "&" in text:
        text = html.unescape(text)
    return text


def _related_synonyms(related: Any) -> list[str]:
    # relatedWords is either a flat list of words or relationship objects
    synonyms: list[str] = []
    for item in related or []:
        if isinstance(item, str):
            synonyms.append(item)
        elif isinstance(item, dict) and item.get("relationshipType") in (None, "synonym"):
            synonyms.extend(w for w in item.get("words") or [] if isinstance(w, str))
    return synonyms


class WordnikAdapter(DictionaryAdapter):
    default_attribution = "from Wordnik"

    def name(self) -> str:
        return "wordnik"

    def is_valid_response(self, raw: Any) -> bool:
        if isinstance(raw, list):
            return len(raw) > 0
        return bool(raw)

    def process_text(self, text: str) -> str:
        return process_cross_references(text, self.settings.wordnik_website_url)

    def _build_url(self, word: str) -> str:
        base = self.settings.wordnik_api_url.rstrip("/")
        return f"{base}/word.json/{quote(word, safe='')}/definitions"

    async def _fetch_definitions(self, word: str, limit: int) -> list[dict]:
        params = {
            "limit": limit,
            "includeRelated": "false",
            "useCanonical": "false",
            "includeTags": "false",
            "api_key": self.settings.wordnik_api_key,
        }
        response = await adapter_get(self._build_url(word), LABEL, params=params, transport=self.transport)
        log.debug(
            "Wordnik rate limits: %s",
            {h: response.headers.get(h) for h in RATE_LIMIT_HEADERS},
        )
        raise_for_http_error(response, word, LABEL)

        data = parse_json_response(response, LABEL)
        if not isinstance(data, list):
            raise_invalid_response(LABEL, "expected a list")
        if not data:
            raise_word_not_found(word, LABEL)
        return data

    async def fetch_word_data(self, word: str, **options: Any) -> DictionaryResponse:
        if not self.settings.wordnik_api_key:
            raise ConfigurationError("Wordnik API key is required", adapter=self.name())
        if not self.settings.wordnik_api_url:
            raise ConfigurationError("WORDNIK_API_URL environment variable is required", adapter=self.name())

        limit = options.get("limit")
        if not isinstance(limit, int):
            limit = self.settings.wordnik_limit

        # Wordnik lookups are case-sensitive and most entries are lowercase
        try:
            data = await self._fetch_definitions(word, limit)
        except WordNotFoundError:
            lowered = word.lower()
            if lowered == word:
                raise
            log.info("No Wordnik entry for %r, retrying as %r", word, lowered)
            data = await self._fetch_definitions(lowered, limit)

        if not self.is_valid_response(data):
            raise_word_not_found(word, LABEL)

        items = [d for d in data if isinstance(d, dict)]
        if not items:
            raise_invalid_response(LABEL, "expected definition objects")

        first = items[0]
        return DictionaryResponse(
            word=word.lower(),
            definitions=[self._to_definition(d) for d in items],
            meta=ResponseMeta(
                source=LABEL,
                attribution=first.get("attributionText") or "",
                url=first.get("wordnikUrl") or "",
            ),
        )

    def _to_definition(self, raw: dict) -> Definition:
        text = raw.get("text") or ""
        if isinstance(text, list):
            text = " ".join(str(t) for t in text)
        pos = raw.get("partOfSpeech")
        examples = [
            e["text"] for e in raw.get("exampleUses") or []
            if isinstance(e, dict) and e.get("text")
        ]
        return Definition(
            id=raw.get("id"),
            part_of_speech=normalize_pos(pos, POS_MAP) if pos else None,
            text=process_wordnik_html(text, self.settings.wordnik_website_url),
            attribution_text=raw.get("attributionText") or "",
            source_dictionary=raw.get("sourceDictionary") or "",
            source_url=raw.get("wordnikUrl") or raw.get("attributionUrl") or "",
            examples=examples or None,
            synonyms=_related_synonyms(raw.get("relatedWords")) or None,
            # definition payloads never carry antonyms
            antonyms=None,
        )
