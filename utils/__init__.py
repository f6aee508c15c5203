"""Utilities package for helper functions."""

from .datetime_utils import (
    display_timezone,
    parse_canvas_datetime,
    format_local,
)

__all__ = [
    'display_timezone',
    'parse_canvas_datetime',
    'format_local',
]
