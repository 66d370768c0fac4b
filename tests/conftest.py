"""Shared test fixtures."""
from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from wotd.config import Settings
from wotd.models import Definition, DictionaryResponse, ResponseMeta, WordData
from wotd.store import WordStore

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


class FakeAPI:
    """Routes adapter HTTP calls to *handler* and records every request."""

    def __init__(self, handler):
        self._handler = handler
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def load_fixture():
    def _load(provider: str, name: str):
        return json.loads((FIXTURES_DIR / provider / f"{name}.json").read_text())
    return _load


@pytest.fixture
def fake_api():
    return FakeAPI


@pytest.fixture
def settings():
    """Settings with keys for every provider and no fallback chain."""
    return Settings(
        wordnik_api_key="test-key",
        wordnik_api_url="https://api.wordnik.com/v4",
        wordnik_website_url="https://www.wordnik.com",
        merriam_webster_api_key="test-key",
        merriam_webster_dictionary="collegiate",
    )


@pytest.fixture
def sample_response():
    return DictionaryResponse(
        word="serendipity",
        definitions=[
            Definition(
                text="an aptitude for making desirable discoveries by accident",
                part_of_speech="noun",
                attribution_text="from Wiktionary",
                source_dictionary="wiktionary",
                source_url="https://en.wiktionary.org/wiki/serendipity",
            ),
        ],
        meta=ResponseMeta(source="Wiktionary", attribution="from Wiktionary",
                          url="https://en.wiktionary.org/wiki/serendipity"),
    )


@pytest.fixture
def tmp_store(tmp_path):
    return WordStore(tmp_path / "words")


@pytest.fixture
def sample_word_data():
    return WordData(
        word="ephemeral",
        date="20240116",
        adapter="wordnik",
        data=[
            Definition(text="Lasting for a markedly brief time.", part_of_speech="adjective",
                       attribution_text="from The American Heritage® Dictionary",
                       source_dictionary="ahd-5",
                       source_url="https://www.wordnik.com/words/ephemeral"),
        ],
    )
