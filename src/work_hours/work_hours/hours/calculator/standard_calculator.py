from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import parse_clock, parse_iso_date
from ...logs.model import LogEntry
from .base import HoursCalculator


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - break_minutes, in hours.

    Missing or unreadable times count as 0. Out before in, or a break longer
    than the span, gives a negative result which is returned as is.
    """

    def worked_minutes(self, entry: LogEntry) -> int:
        if not entry.time_in or not entry.time_out:
            return 0

        t_in = parse_clock(entry.time_in)
        t_out = parse_clock(entry.time_out)
        if t_in is None or t_out is None:
            return 0
        try:
            day = parse_iso_date(entry.date)
        except (TypeError, ValueError):
            return 0

        span = datetime.combine(day, t_out) - datetime.combine(day, t_in)
        return int(span.total_seconds() // 60) - int(entry.break_minutes or 0)

    def hours(self, entry: LogEntry) -> float:
        return self.worked_minutes(entry) / 60


_default = StandardHoursCalculator()


def hours(entry: LogEntry) -> float:
    return _default.hours(entry)
