"""Normalization helpers.

Centralizes defensive parsing and placeholder handling.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta
from typing import Any

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1e11

# RFC 3339 fractions may carry nanoseconds; datetime keeps microseconds.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def parse_timestamp(value: Any) -> datetime | None:
    """Convert a timestamp to an aware UTC datetime.

    - ``datetime``: naive values are taken as UTC
    - RFC 3339 strings (``"2025-05-01T10:00:00.123456789Z"``)
    - epoch numbers in seconds or milliseconds (> 1e11)
    - anything else -> ``None``
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        numeric = safe_float(text)
        if numeric is None:
            text = _FRACTION_RE.sub(r"\1", text)
            if text.endswith(("Z", "z")):
                text = f"{text[:-1]}+00:00"
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                return None
            return parsed.replace(tzinfo=UTC) if parsed.tzinfo is None else parsed.astimezone(UTC)
        value = numeric
    ts = safe_float(value)
    if ts is None or ts <= 0:
        return None
    if ts > _MS_THRESHOLD:
        ts /= 1000.0
    try:
        return datetime.fromtimestamp(ts, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def to_epoch_millis(value: datetime) -> int:
    """Epoch milliseconds of an aware datetime (naive is taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // timedelta(milliseconds=1)
