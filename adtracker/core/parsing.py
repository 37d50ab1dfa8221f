"""
Lenient input parsing for store operations.

Request values may arrive as numbers or numeric strings ("10.50", "1000").
Everything is converted and range-checked here, so code past the store
boundary only ever sees validated ``float``/``int`` values.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from adtracker.common.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    """None and blank strings count as not supplied."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_text(value: Any, field: str) -> str:
    """Return ``value`` trimmed; reject missing, blank or non-string values."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"Missing required field: {field}",
            details={"field": field},
        )
    return value.strip()


# Counters must fit a signed 64-bit integer to round-trip through the data file
MAX_COUNT = 2**63 - 1


def _describe(value: Any) -> str:
    """Short printable form of a rejected value for error details."""
    if isinstance(value, int) and not isinstance(value, bool) and value.bit_length() > 64:
        return "<integer out of range>"
    text = repr(value)
    return text if len(text) <= 64 else f"{text[:61]}..."


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            return float(value.strip())
    except (ValueError, OverflowError):
        return None
    return None


def parse_amount(value: Any) -> float:
    """Parse a revenue amount: finite, non-negative."""
    number = _to_number(value)
    if number is None or not math.isfinite(number) or number < 0:
        raise ValidationError(
            "Invalid amount: must be a non-negative number",
            details={"field": "amount", "value": _describe(value)},
        )
    return number


def parse_count(value: Any, field: str) -> int:
    """Parse an impressions/clicks counter: whole number in ``0..MAX_COUNT``."""
    count: int | None = None
    if isinstance(value, int) and not isinstance(value, bool):
        count = value
    else:
        number = _to_number(value)
        if number is not None and math.isfinite(number) and number.is_integer():
            count = int(number)

    if count is None or not 0 <= count <= MAX_COUNT:
        raise ValidationError(
            f"Invalid {field}: must be a non-negative integer",
            details={"field": field, "value": _describe(value)},
        )
    return count


def parse_date(value: Any, today: date) -> str:
    """Parse an optional calendar date; absent means ``today``."""
    if is_missing(value):
        return today.isoformat()
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()).isoformat()
        except ValueError:
            pass
    raise ValidationError(
        "Invalid date: expected YYYY-MM-DD",
        details={"field": "date", "value": _describe(value)},
    )
