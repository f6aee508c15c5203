"""Canvas timestamp parsing and local-time display."""

from __future__ import annotations

import os
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def parse_canvas_datetime(value: str) -> datetime:
    """
    Parse a Canvas ISO8601 timestamp such as '2025-01-15T00:00:00Z'.
    The result is always timezone-aware; timestamps without an offset are UTC.
    """
    if not value:
        raise ValueError("Empty datetime string")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def display_timezone() -> tzinfo:
    """The zone named by TIMEZONE when it is known, else the system zone."""
    name = os.getenv("TIMEZONE")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            pass
    return datetime.now().astimezone().tzinfo or timezone.utc


def format_local(moment: datetime, fmt: str = "%b %d, %Y") -> str:
    """Format an aware datetime in the display timezone."""
    return moment.astimezone(display_timezone()).strftime(fmt)
