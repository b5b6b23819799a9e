"""Formatting helpers for timestamps and durations."""

from __future__ import annotations

import re
import time
from datetime import datetime

_ISO_DATE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")

_UNITS = (
    ("year", 31536000),
    ("month", 2592000),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _tmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _tdiv(a, b)


def time_to_string(timestamp: float) -> str:
    """Format a Unix timestamp as local ``YYYY-MM-DD HH:MM``."""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def iso_time_to_string(value: str) -> str:
    """Reduce an ISO 8601 timestamp to ``YYYY-MM-DD``; empty input gives ``NA``."""
    if not value:
        return "NA"
    match = _ISO_DATE.match(value)
    if match is None:
        raise ValueError(f"not an ISO date: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    return f"{year}-{month:02}-{day:02}"


def working_time(seconds: int) -> str:
    """Format a number of seconds as ``Xh Ym Zs``, omitting empty leading units."""
    if seconds <= 0:
        return "NA"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


def platformer_time(milliseconds: int) -> str:
    """Format a platformer best time given in milliseconds."""
    millis = _tmod(milliseconds, 1000)
    seconds = _tmod(_tdiv(milliseconds, 1000), 60)
    minutes = _tmod(_tdiv(milliseconds, 60000), 60)
    hours = _tdiv(milliseconds, 3600000)
    if hours > 0:
        return f"{hours}:{minutes}:{seconds}.{millis}"
    if minutes > 0:
        return f"{minutes}:{seconds}.{millis}"
    return f"{seconds}.{millis}"


def timestamp_to_human_readable(timestamp: float, now: float | None = None) -> str:
    """Describe how long ago ``timestamp`` was, in the largest whole unit."""
    if now is None:
        now = time.time()
    diff = now - timestamp
    for name, length in _UNITS:
        amount = int(diff / length)
        if amount > 0:
            return f"{amount} {name}{'s' if amount > 1 else ''}"
    return "Less than 1 minute"