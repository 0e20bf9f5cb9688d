from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any

def is_aware(value: Any) -> bool:
    return isinstance(value, datetime) and value.utcoffset() is not None

def _format_offset(offset: timedelta) -> str:
    # Sub-minute offsets are truncated toward zero.
    total_minutes = int(offset.total_seconds() / 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"

def format_atom(value: datetime) -> str:
    """Render a timezone-aware datetime as RFC 3339 text with a numeric offset.

    2024-01-15T09:00:00+00:00 -- no fractional seconds, never "Z".
    """
    offset = value.utcoffset()
    if offset is None:
        raise ValueError(f"Cannot format naive datetime {value!r}; a timezone is required.")
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{_format_offset(offset)}"
    )
