"""Shared conversions between fetched responses, stored records and display data."""
from __future__ import annotations

from collections.abc import Callable, Sequence

from wotd.models import Definition, DictionaryResponse, DisplayMeta, WordData, WordDisplay


def transform_to_word_data(adapter_name: str, response: DictionaryResponse, date: str) -> WordData:
    return WordData(
        word=response.word,
        date=date,
        adapter=adapter_name,
        data=list(response.definitions),
        raw_data=response,
    )


def _definition_text(item: Definition) -> str:
    # Older stored Wordnik data sometimes holds text as a list of fragments
    if isinstance(item.text, list):
        return " ".join(str(t) for t in item.text)
    return item.text if isinstance(item.text, str) else ""


def find_valid_definition(definitions: Sequence[Definition] | None) -> Definition | None:
    """Return the first definition carrying both a part of speech and text.

    Definitions without a part of speech are skipped.  List-valued text is
    joined with spaces on the returned copy.
    """
    if not definitions:
        return None
    for item in definitions:
        if not item.part_of_speech:
            continue
        text = _definition_text(item)
        if text.strip():
            if text is item.text:
                return item
            return Definition(
                text=text,
                attribution_text=item.attribution_text,
                source_dictionary=item.source_dictionary,
                source_url=item.source_url,
                id=item.id,
                part_of_speech=item.part_of_speech,
                examples=item.examples,
                synonyms=item.synonyms,
                antonyms=item.antonyms,
            )
    return None


def transform_word_data(
    word_data: WordData | None,
    default_attribution: str,
    process_text: Callable[[str], str] | None = None,
) -> WordDisplay:
    if word_data is None or not word_data.data:
        return WordDisplay.empty()

    valid = find_valid_definition(word_data.data)
    if valid is None:
        return WordDisplay.empty()

    text = process_text(valid.text) if process_text else valid.text
    return WordDisplay(
        part_of_speech=valid.part_of_speech or "",
        definition=text,
        meta=DisplayMeta(
            attribution_text=valid.attribution_text or default_attribution,
            source_dictionary=valid.source_dictionary or None,
            source_url=valid.source_url or "",
        ),
    )
