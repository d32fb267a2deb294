"""Vote store document ingestion + parsing.

Documents follow the Firestore REST shape::

    {"name": ".../parking_votes/<location>/votes/<voter>",
     "fields": {"status": {"stringValue": "GREEN"},
                "timestamp": {"timestampValue": "2025-05-01T10:00:00Z"}}}

Plain ``{"status": ..., "timestamp": ...}`` mappings are accepted as well.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from parkstatus.exceptions import ParkStatusDataError
from parkstatus.models.vote import Vote

_logger = logging.getLogger(__name__)

_VALUE_KEYS = (
    "stringValue",
    "timestampValue",
    "integerValue",
    "doubleValue",
    "booleanValue",
)


def decode_value(value: Any) -> Any:
    """Unwrap a typed Firestore value; other values pass through."""
    if isinstance(value, dict):
        if "nullValue" in value:
            return None
        for key in _VALUE_KEYS:
            if key in value:
                return value[key]
    return value


def _voter_key_from_name(name: Any) -> str | None:
    if not isinstance(name, str) or not name:
        return None
    return name.rsplit("/", 1)[-1] or None


def parse_vote(location_id: str, document: Any) -> Vote:
    """Parse one vote document, raising :class:`ParkStatusDataError` when unusable."""
    if isinstance(document, Vote):
        return document
    if not isinstance(document, dict):
        raise ParkStatusDataError(f"vote document is not an object: {type(document).__name__}")

    raw_fields = document.get("fields")
    fields: dict[str, Any] = raw_fields if isinstance(raw_fields, dict) else document
    voter_key = _voter_key_from_name(document.get("name")) or fields.get("voterKey") or fields.get("voter_key")

    try:
        return Vote.model_validate(
            {
                "location_id": location_id,
                "voter_key": decode_value(voter_key) or "",
                "status": decode_value(fields.get("status")),
                "timestamp": decode_value(fields.get("timestamp")),
            }
        )
    except ValidationError as exc:
        raise ParkStatusDataError(f"invalid vote document: {exc.error_count()} error(s)") from exc


def parse_votes(location_id: str, documents: Iterable[Any]) -> list[Vote]:
    """Parse vote documents, dropping unparseable status or timestamp entries."""
    votes: list[Vote] = []
    for document in documents:
        try:
            votes.append(parse_vote(location_id, document))
        except ParkStatusDataError as exc:
            _logger.debug("Dropping vote for %s: %s", location_id, exc)
    return votes


def parse_run_query_response(location_id: str, payload: Any) -> list[Vote]:
    """Extract votes from a ``runQuery`` response (a list of result entries)."""
    if not isinstance(payload, list):
        return []
    documents = [entry["document"] for entry in payload if isinstance(entry, dict) and "document" in entry]
    return parse_votes(location_id, documents)
