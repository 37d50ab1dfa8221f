"""
Utility functions for AdTracker.
"""

from __future__ import annotations

import time
import uuid
from datetime import date, datetime, timezone
from typing import Any

import orjson


def generate_request_id() -> str:
    """Generate a unique request ID."""
    return str(uuid.uuid4())


def generate_id() -> str:
    """Generate an opaque entity ID (random 128 bits as hex)."""
    return uuid.uuid4().hex


def current_datetime() -> datetime:
    """Get current datetime in UTC."""
    return datetime.now(timezone.utc)


def current_date(now: datetime | None = None) -> date:
    """Get the current UTC calendar date."""
    return (now or current_datetime()).astimezone(timezone.utc).date()


def isoformat_utc(dt: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision ("...Z")."""
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def json_dumps(obj: Any, indent: bool = False) -> str:
    """Fast JSON serialization using orjson."""
    option = orjson.OPT_INDENT_2 if indent else None
    return orjson.dumps(obj, option=option).decode("utf-8")


def json_loads(s: str | bytes) -> Any:
    """Fast JSON deserialization using orjson."""
    return orjson.loads(s)


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safe division that returns default on zero division."""
    if denominator == 0:
        return default
    return numerator / denominator


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, name: str = ""):
        self.name = name
        self.start_time: float = 0
        self.end_time: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end_time = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (self.end_time - self.start_time) * 1000
