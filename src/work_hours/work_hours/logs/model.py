from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class LogEntry:
    """Domain entity: one calendar day's work record.

    `date` is kept as the ISO `YYYY-MM-DD` string and the clock fields as
    `HH:MM` strings, exactly as the user entered them.
    """

    date: str
    time_in: str = ""
    time_out: str = ""
    break_minutes: int = 0
    id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class LogForm:
    """Validated input for creating or editing a LogEntry."""

    date: str
    time_in: str
    time_out: str
    break_minutes: int

    def as_fields(self) -> dict:
        return {
            "date": self.date,
            "time_in": self.time_in,
            "time_out": self.time_out,
            "break_minutes": self.break_minutes,
        }
