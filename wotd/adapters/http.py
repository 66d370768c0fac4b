"""HTTP helpers shared by the dictionary adapters."""
from __future__ import annotations

from typing import Any, NoReturn

import httpx

from wotd.errors import (
    AdapterRequestError,
    InvalidResponseError,
    RateLimitError,
    WordNotFoundError,
    word_not_found_message,
)


ERROR_BODY_LIMIT = 200


async def adapter_get(
    url: str,
    adapter_label: str,
    params: dict[str, Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """GET *url*, wrapping transport failures with the adapter's name."""
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            return await client.get(url, params=params)
    except httpx.HTTPError as e:
        raise AdapterRequestError(f"{adapter_label} request failed: {e}", adapter=adapter_label) from e


def raise_for_http_error(response: httpx.Response, word: str, adapter_label: str | None = None) -> None:
    if response.is_success:
        return
    if response.status_code == 429:
        raise RateLimitError(
            "Rate limit exceeded. Remaining: "
            f"{response.headers.get('x-ratelimit-remaining-minute', '?')} per minute, "
            f"{response.headers.get('x-ratelimit-remaining-hour', '?')} per hour.",
            adapter=adapter_label,
        )
    if response.status_code == 404:
        raise WordNotFoundError(word_not_found_message(word), adapter=adapter_label)
    raise AdapterRequestError(
        f"Failed to fetch word data: {response.reason_phrase or response.status_code}",
        adapter=adapter_label,
    )


def parse_json_response(response: httpx.Response, adapter_label: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        body = response.text[:ERROR_BODY_LIMIT]
        raise InvalidResponseError(
            f"Invalid API response (not JSON) from {adapter_label}: {body}",
            adapter=adapter_label,
        ) from e


def raise_word_not_found(word: str, adapter_label: str | None = None) -> NoReturn:
    raise WordNotFoundError(word_not_found_message(word), adapter=adapter_label)


def raise_invalid_response(adapter_label: str, detail: str) -> NoReturn:
    raise InvalidResponseError(f"Invalid API response from {adapter_label}: {detail}", adapter=adapter_label)
