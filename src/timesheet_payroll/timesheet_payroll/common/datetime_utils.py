from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Optional

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(int(year), int(month))[1]


def to_minutes(value: str) -> Optional[int]:
    """Convert an "H:MM" / "HH:MM" clock string to minutes since midnight.

    Returns None for anything that is not a valid 24h clock time.
    """
    if not value:
        return None
    m = _CLOCK_RE.match(value)
    if not m:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def format_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def normalize_clock(value: str) -> Optional[str]:
    """Zero-pad a clock string ("9:05" -> "09:05"); None when invalid."""
    minutes = to_minutes(value)
    if minutes is None:
        return None
    return format_minutes(minutes)


def overlap_minutes(start: int, end: int, window_start: int, window_end: int) -> int:
    return max(0, min(end, window_end) - max(start, window_start))
