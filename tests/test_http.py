"""Tests for the shared adapter HTTP helpers."""
from __future__ import annotations

import httpx
import pytest

from wotd.adapters.http import (
    adapter_get,
    parse_json_response,
    raise_for_http_error,
    raise_invalid_response,
    raise_word_not_found,
)
from wotd.errors import (
    AdapterRequestError,
    InvalidResponseError,
    RateLimitError,
    WordNotFoundError,
)


class TestRaiseForHttpError:
    def test_success_passes(self):
        raise_for_http_error(httpx.Response(200, json=[]), "word")

    def test_not_found(self):
        with pytest.raises(WordNotFoundError) as exc:
            raise_for_http_error(httpx.Response(404), "xyzzy", "Wordnik")
        assert str(exc.value) == 'Word "xyzzy" not found in dictionary. Please check the spelling.'
        assert exc.value.adapter == "Wordnik"

    def test_rate_limit_reports_remaining(self):
        response = httpx.Response(429, headers={
            "x-ratelimit-remaining-minute": "0",
            "x-ratelimit-remaining-hour": "12",
        })
        with pytest.raises(RateLimitError) as exc:
            raise_for_http_error(response, "word")
        assert "Rate limit exceeded" in str(exc.value)
        assert "0 per minute" in str(exc.value)
        assert "12 per hour" in str(exc.value)

    def test_other_status(self):
        with pytest.raises(AdapterRequestError) as exc:
            raise_for_http_error(httpx.Response(500), "word")
        assert str(exc.value) == "Failed to fetch word data: Internal Server Error"


class TestParseJsonResponse:
    def test_valid(self):
        assert parse_json_response(httpx.Response(200, json={"a": 1}), "Wiktionary") == {"a": 1}

    def test_not_json_truncated(self):
        body = "Invalid API key. " * 30
        with pytest.raises(InvalidResponseError) as exc:
            parse_json_response(httpx.Response(200, text=body), "Merriam-Webster")
        message = str(exc.value)
        assert message.startswith("Invalid API response (not JSON) from Merriam-Webster: Invalid API key.")
        assert message.endswith(body[:200])


class TestRaiseHelpers:
    def test_word_not_found(self):
        with pytest.raises(WordNotFoundError) as exc:
            raise_word_not_found("xyzzy", "Wiktionary")
        assert exc.value.adapter == "Wiktionary"
        assert "xyzzy" in str(exc.value)

    def test_invalid_response(self):
        with pytest.raises(InvalidResponseError) as exc:
            raise_invalid_response("Wordnik", "expected a list")
        assert str(exc.value) == "Invalid API response from Wordnik: expected a list"
        assert exc.value.adapter == "Wordnik"


class TestAdapterGet:
    @pytest.mark.asyncio
    async def test_passes_params(self, fake_api):
        api = fake_api(lambda request: httpx.Response(200, json=[]))
        response = await adapter_get("https://example.com/x", "Test", params={"key": "k"}, transport=api.transport)
        assert response.status_code == 200
        assert api.requests[0].url.params["key"] == "k"

    @pytest.mark.asyncio
    async def test_transport_failure_wrapped(self):
        def _fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(AdapterRequestError) as exc:
            await adapter_get("https://example.com/x", "Wiktionary", transport=httpx.MockTransport(_fail))
        assert str(exc.value).startswith("Wiktionary request failed:")
        assert isinstance(exc.value.__cause__, httpx.ConnectError)
