"""Tolerant converters for raw JSON values coming from the Honda Aid API."""

from datetime import datetime, timezone
from typing import Any


def parse_timestamp(raw: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None for missing or invalid input.

    A trailing ``Z`` is accepted. Naive values are assumed to be UTC.
    """
    if not raw or not isinstance(raw, str):
        return None
    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def as_float(raw: Any, default: float = 0.0) -> float:
    """Coerce a number or numeric string to float."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def as_int(raw: Any) -> int | None:
    """Coerce to int, or None when the value is absent or not numeric."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def as_str(raw: Any) -> str:
    return "" if raw is None else str(raw)


def as_optional_str(raw: Any) -> str | None:
    """Like ``as_str`` but keeps an absent value as None."""
    return None if raw is None else str(raw)
