"""JSON-over-HTTP transport shared by the collaborator clients."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from parkstatus._constants import USER_AGENT
from parkstatus._redact import redact_headers, redact_payload
from parkstatus.exceptions import ParkStatusTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by collaborator clients.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        payload: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        ...


class HttpTransport:
    """aiohttp-backed transport sending and receiving JSON bodies."""

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float = 15.0) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        payload: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send *payload* as JSON and return the decoded JSON response.

        Raises
        ------
        ParkStatusTransportError
            On network failure, timeout, non-2xx status or a non-JSON body.
        """
        request_headers: dict[str, str] = {
            "accept": "application/json",
            "content-type": "application/json; charset=UTF-8",
            "user-agent": USER_AGENT,
        }
        if headers:
            request_headers.update(headers)

        body = json.dumps(payload, separators=(",", ":")) if payload is not None else None
        endpoint = url.split("?", 1)[0]

        _logger.debug(
            "%s %s headers=%s body=%s",
            method,
            endpoint,
            redact_headers(request_headers),
            redact_payload(payload),
        )

        try:
            async with self._http.request(
                method,
                url,
                data=body,
                headers=request_headers,
                timeout=self._timeout,
            ) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise ParkStatusTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except ParkStatusTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ParkStatusTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        if not text.strip():
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParkStatusTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc
