"""Error kinds raised by dictionary adapters and the word store."""
from __future__ import annotations


class DictionaryError(Exception):
    """Base class for every failure a dictionary lookup can surface."""

    def __init__(self, message: str, adapter: str | None = None):
        super().__init__(message)
        self.adapter = adapter


class ConfigurationError(DictionaryError):
    """Missing API key or base URL, or an unknown adapter name."""


class WordNotFoundError(DictionaryError):
    pass


class RateLimitError(DictionaryError):
    pass


class AdapterRequestError(DictionaryError):
    """Transport failure or an unexpected non-OK HTTP status."""


class InvalidResponseError(DictionaryError):
    """Provider answered with a body that is not JSON or has the wrong shape."""


class EntryExistsError(ValueError):
    pass


def word_not_found_message(word: str) -> str:
    return f'Word "{word}" not found in dictionary. Please check the spelling.'
