from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import CLOCK_FORMAT, DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_clock(value: Optional[str]) -> Optional[time]:
    """Parse HH:MM into a time, or None when empty or malformed."""
    v = (value or "").strip()
    if not v:
        return None
    try:
        return datetime.strptime(v, CLOCK_FORMAT).time()
    except ValueError:
        return None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def now_local() -> datetime:
    return datetime.now()
