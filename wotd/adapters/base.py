from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import httpx

from wotd.config import Settings
from wotd.models import DictionaryResponse, WordData, WordDisplay
from wotd.transformers import transform_to_word_data, transform_word_data


class DictionaryAdapter(ABC):
    default_attribution = ""

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings or Settings()
        self.transport = transport

    @abstractmethod
    async def fetch_word_data(self, word: str, **options: Any) -> DictionaryResponse:
        ...

    @abstractmethod
    def is_valid_response(self, raw: Any) -> bool:
        ...

    @abstractmethod
    def name(self) -> str:
        ...

    def process_text(self, text: str) -> str:
        """Adapter-specific display transform applied to stored definition text."""
        return text

    def transform_to_word_data(self, response: DictionaryResponse, date: str) -> WordData:
        return transform_to_word_data(self.name(), response, date)

    def transform_word_data(self, word_data: WordData | None) -> WordDisplay:
        return transform_word_data(word_data, self.default_attribution, self.process_text)
