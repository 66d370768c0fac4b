from __future__ import annotations

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
from wotd.errors import ConfigurationError
from wotd.models import Definition, DictionaryResponse, ResponseMeta
from wotd.parts_of_speech import normalize_pos

LABEL = "Wiktionary"

# The Free Dictionary API mostly returns base values already
POS_MAP = {
    "exclamation": "interjection",
}


class WiktionaryAdapter(DictionaryAdapter):
    default_attribution = "from Wiktionary"

    def name(self) -> str:
        return "wiktionary"

    def is_valid_response(self, raw: Any) -> bool:
        if not isinstance(raw, list) or not raw:
            return False
        first = raw[0]
        return isinstance(first, dict) and isinstance(first.get("meanings"), list) and len(first["meanings"]) > 0

    async def fetch_word_data(self, word: str, **options: Any) -> DictionaryResponse:
        base = self.settings.wiktionary_api_url
        if not base:
            raise ConfigurationError("WIKTIONARY_API_URL environment variable is required", adapter=self.name())

        response = await adapter_get(f"{base.rstrip('/')}/{quote(word, safe='')}", LABEL, transport=self.transport)
        raise_for_http_error(response, word, LABEL)

        data = parse_json_response(response, LABEL)
        if not isinstance(data, list):
            raise_invalid_response(LABEL, "expected a list of entries")
        if data and not isinstance(data[0], dict):
            raise_invalid_response(LABEL, "expected entry objects")
        if not self.is_valid_response(data):
            raise_word_not_found(word, LABEL)

        entry = data[0]
        source_urls = entry.get("sourceUrls") or []
        url = source_urls[0] if isinstance(source_urls, list) and source_urls else ""
        attribution = "from Wiktionary"

        definitions: list[Definition] = []
        for meaning in entry["meanings"]:
            if not isinstance(meaning, dict):
                raise_invalid_response(LABEL, f"malformed meaning {meaning!r}")
            raw_pos = meaning.get("partOfSpeech")
            pos = normalize_pos(raw_pos, POS_MAP) if isinstance(raw_pos, str) and raw_pos else None
            raw_defs = meaning.get("definitions") or []
            if not isinstance(raw_defs, list):
                raise_invalid_response(LABEL, "meaning definitions must be a list")
            for d in raw_defs:
                if not isinstance(d, dict):
                    raise_invalid_response(LABEL, f"malformed definition {d!r}")
                example = d.get("example")
                definitions.append(Definition(
                    part_of_speech=pos,
                    text=d.get("definition") or "",
                    attribution_text=attribution,
                    source_dictionary="wiktionary",
                    source_url=url,
                    examples=[example] if example else None,
                    synonyms=list(d["synonyms"]) if d.get("synonyms") else None,
                    antonyms=list(d["antonyms"]) if d.get("antonyms") else None,
                ))

        if not definitions:
            raise_word_not_found(word, LABEL)

        return DictionaryResponse(
            word=word.lower(),
            definitions=definitions,
            meta=ResponseMeta(source=LABEL, attribution=attribution, url=url),
        )
