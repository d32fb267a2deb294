from __future__ import annotations

import json
from typing import Any

import aiohttp
import pytest

from parkstatus._transport import HttpTransport
from parkstatus.exceptions import ParkStatusTransportError


class _FakeResponse:
    def __init__(self, status: int, text: str) -> None:
        self.status = status
        self._text = text

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.requests: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


@pytest.mark.asyncio
async def test_request_json_round_trip() -> None:
    session = _FakeSession(_FakeResponse(200, '{"places": []}'))
    transport = HttpTransport(session, timeout=5.0)  # type: ignore[arg-type]

    result = await transport.request_json(
        "POST",
        "https://example.test/v1/search?x=1",
        payload={"a": 1},
        headers={"X-Goog-Api-Key": "secret"},
    )

    assert result == {"places": []}
    sent = session.requests[0]
    assert json.loads(sent["data"]) == {"a": 1}
    assert sent["headers"]["X-Goog-Api-Key"] == "secret"
    assert sent["headers"]["content-type"].startswith("application/json")


@pytest.mark.asyncio
async def test_non_2xx_raises_transport_error() -> None:
    transport = HttpTransport(_FakeSession(_FakeResponse(503, "unavailable")))  # type: ignore[arg-type]

    with pytest.raises(ParkStatusTransportError) as exc_info:
        await transport.request_json("POST", "https://example.test/v1/x?key=abc")

    assert exc_info.value.status_code == 503
    assert exc_info.value.endpoint == "https://example.test/v1/x"


@pytest.mark.asyncio
async def test_client_error_wrapped() -> None:
    transport = HttpTransport(_FakeSession(error=aiohttp.ClientConnectionError("refused")))  # type: ignore[arg-type]

    with pytest.raises(ParkStatusTransportError):
        await transport.request_json("GET", "https://example.test/v1/x")


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error() -> None:
    transport = HttpTransport(_FakeSession(_FakeResponse(200, "<html>")))  # type: ignore[arg-type]

    with pytest.raises(ParkStatusTransportError):
        await transport.request_json("GET", "https://example.test/v1/x")


@pytest.mark.asyncio
async def test_empty_body_is_empty_object() -> None:
    transport = HttpTransport(_FakeSession(_FakeResponse(204, "")))  # type: ignore[arg-type]

    assert await transport.request_json("POST", "https://example.test/v1/x") == {}


@pytest.mark.asyncio
async def test_debug_log_redacts_credentials_and_voter_key(caplog: pytest.LogCaptureFixture) -> None:
    transport = HttpTransport(_FakeSession(_FakeResponse(200, "{}")))  # type: ignore[arg-type]
    name = "projects/p/databases/(default)/documents/parking_votes/a/votes/install-42"

    with caplog.at_level("DEBUG", logger="parkstatus._transport"):
        await transport.request_json(
            "POST",
            "https://example.test/v1/projects/p/databases/(default)/documents:commit",
            payload={"writes": [{"update": {"name": name}}]},
            headers={"authorization": "Bearer tok-secret"},
        )

    assert "tok-secret" not in caplog.text
    assert "install-42" not in caplog.text
    assert "documents:commit" in caplog.text
