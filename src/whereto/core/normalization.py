"""Normalization helpers for timestamps coming from schedule datasets."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Union

Timestamp = Union[str, int, float, datetime]


def parse_timestamp(value: Timestamp) -> datetime:
    """Parse an ISO-8601 string, epoch milliseconds or datetime into an aware datetime.

    Naive values are taken as UTC.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid timestamp: {value!r}")
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        try:
            if not math.isfinite(value):
                raise ValueError(f"invalid timestamp: {value!r}")
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"invalid timestamp: {value!r}") from exc
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def whole_hours_between(start: datetime, end: datetime) -> int:
    """Signed whole hours from start to end, truncated toward zero."""
    seconds = (end - start).total_seconds()
    return int(math.trunc(seconds / 3600))
