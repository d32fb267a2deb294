"""Redaction of outgoing requests for DEBUG logs.

Places searches send the API key in the ``X-Goog-Api-Key`` header.  Vote
store calls may send a bearer token, and vote commits embed the voter key
as the last segment of the document name::

    projects/<p>/databases/<db>/documents/parking_votes/<location>/votes/<voterKey>
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

REDACTED = "<redacted>"

_SECRET_HEADERS = frozenset({"x-goog-api-key", "authorization", "cookie"})
_SECRET_FIELDS = frozenset({"key", "voterkey", "voter_key"})
_VOTER_SEGMENT = re.compile(r"(/votes/)[^/?#\s]+")


def redact_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Copy of *headers* with credentials masked (names compared case-insensitively)."""
    return {
        name: REDACTED if name.lower() in _SECRET_HEADERS else value
        for name, value in (headers or {}).items()
    }


def redact_document_name(name: str) -> str:
    """Mask the voter key segment of a vote document path."""
    return _VOTER_SEGMENT.sub(lambda match: match.group(1) + REDACTED, name)


def redact_payload(value: Any, *, max_string: int = 256) -> Any:
    """Copy of a JSON request body safe for logging.

    Voter key fields are masked, vote document names lose their voter
    segment and long strings are shortened.
    """
    if isinstance(value, str):
        text = redact_document_name(value)
        if len(text) > max_string:
            return f"{text[:max_string]}…"
        return text
    if isinstance(value, Mapping):
        return {
            key: REDACTED if str(key).lower() in _SECRET_FIELDS else redact_payload(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_payload(item, max_string=max_string) for item in value]
    return value
