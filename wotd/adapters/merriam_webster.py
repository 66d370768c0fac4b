from __future__ import annotations

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
from wotd.adapters.mw_markup import extract_examples
from wotd.errors import ConfigurationError, WordNotFoundError
from wotd.models import Definition, DictionaryResponse, ResponseMeta
from wotd.parts_of_speech import normalize_pos

log = logging.getLogger("wotd.merriam_webster")

LABEL = "Merriam-Webster"

POS_MAP = {
    "auxiliary verb": "verb",
    "intransitive verb": "verb",
    "transitive verb": "verb",
    "phrasal verb": "verb",
    "proper noun": "noun",
    "noun plural": "noun",
    "plural noun": "noun",
    "noun phrase": "noun",
    "noun suffix": "noun",
    "noun combining form": "noun",
    "combining form": "noun",
    "prefix": "noun",
    "adjective suffix": "adjective",
    "definite article": "article",
    "indefinite article": "article",
}

DICTIONARY_LABELS = {
    "collegiate": "Collegiate Dictionary",
    "medical": "Medical Dictionary",
    "learners": "Learner's Dictionary",
    "sd2": "Elementary Dictionary",
    "sd3": "Intermediate Dictionary",
    "sd4": "School Dictionary",
    "spanish": "Spanish-English Dictionary",
    "ithesaurus": "Intermediate Thesaurus",
}

SUGGESTION_LIMIT = 5

_HOMOGRAPH_SUFFIX = re.compile(r":\d+$")
_LOOSE_COLON = re.compile(r" +: +")


def dictionary_label(dictionary: str) -> str:
    return DICTIONARY_LABELS.get(dictionary, dictionary)


def source_url(word: str) -> str:
    return f"https://www.merriam-webster.com/dictionary/{quote(word, safe='')}"


def is_entry_list(data: Any) -> bool:
    """True for a list of entry objects; MW answers unknown words with a list of strings."""
    return isinstance(data, list) and len(data) > 0 and not isinstance(data[0], str)


class MerriamWebsterAdapter(DictionaryAdapter):
    default_attribution = "from Merriam-Webster"

    def name(self) -> str:
        return "merriam-webster"

    def is_valid_response(self, raw: Any) -> bool:
        return is_entry_list(raw)

    async def fetch_word_data(self, word: str, **options: Any) -> DictionaryResponse:
        s = self.settings
        if not s.merriam_webster_api_key:
            raise ConfigurationError("MERRIAM_WEBSTER_API_KEY environment variable is required", adapter=self.name())
        if not s.merriam_webster_api_url:
            raise ConfigurationError("MERRIAM_WEBSTER_API_URL environment variable is required", adapter=self.name())
        if not s.merriam_webster_dictionary:
            raise ConfigurationError("MERRIAM_WEBSTER_DICTIONARY environment variable is required", adapter=self.name())

        dictionary = s.merriam_webster_dictionary
        url = f"{s.merriam_webster_api_url.rstrip('/')}/{dictionary}/json/{quote(word, safe='')}"
        response = await adapter_get(url, LABEL, params={"key": s.merriam_webster_api_key}, transport=self.transport)
        raise_for_http_error(response, word, LABEL)

        data = parse_json_response(response, LABEL)
        if not isinstance(data, list):
            raise_invalid_response(LABEL, "expected a list of entries or suggestions")
        if not data:
            raise_word_not_found(word, LABEL)

        if isinstance(data[0], str):
            suggestions = ", ".join(str(x) for x in data[:SUGGESTION_LIMIT])
            raise WordNotFoundError(f'Word "{word}" not found. Did you mean: {suggestions}', adapter=self.name())

        label = dictionary_label(dictionary)
        entries = [
            e for e in data
            if isinstance(e, dict) and isinstance(e.get("meta"), dict) and e["meta"].get("src") == dictionary
        ]
        if not entries:
            raise WordNotFoundError(f'Word "{word}" not found in {label}.', adapter=self.name())

        url = source_url(word)
        attribution = f"from Merriam-Webster's {label}"
        definitions: list[Definition] = []
        for entry in entries:
            entry_id = _HOMOGRAPH_SUFFIX.sub("", str(entry["meta"].get("id", "")))
            fl = entry.get("fl")
            pos = normalize_pos(fl, POS_MAP) if isinstance(fl, str) and fl else None
            examples = extract_examples(entry)
            shortdefs = entry.get("shortdef") or []
            if not isinstance(shortdefs, list) or not all(isinstance(t, str) for t in shortdefs):
                raise_invalid_response(LABEL, f"malformed shortdef in entry {entry_id!r}")
            for text in shortdefs:
                definitions.append(Definition(
                    id=entry_id,
                    part_of_speech=pos,
                    text=_LOOSE_COLON.sub(": ", text),
                    attribution_text=attribution,
                    source_dictionary=dictionary,
                    source_url=url,
                    examples=list(examples) if examples else None,
                ))

        if not definitions:
            log.info("MW entries for %r carried no short definitions", word)
            raise_word_not_found(word, LABEL)

        return DictionaryResponse(
            word=word.lower(),
            definitions=definitions,
            meta=ResponseMeta(source=LABEL, attribution=attribution, url=url),
        )
