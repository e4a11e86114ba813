from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..core.constants import WORKDAYS
from ..logs.model import LogEntry
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator


@dataclass(frozen=True)
class PeriodTotals:
    daily: float
    weekly: float


def week_days(today: date) -> list[date]:
    """The seven days of the Monday-starting week containing `today`."""
    monday = today - timedelta(days=today.weekday())
    return [monday + timedelta(days=i) for i in range(7)]


def _find_by_date(logs: Iterable[LogEntry], day: str) -> Optional[LogEntry]:
    return next((log for log in logs if log.date == day), None)


def aggregate(
    logs: Sequence[LogEntry],
    today: date,
    override: Optional[float] = None,
    carry: float = 0.0,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> PeriodTotals:
    """Today's hours and this week's (Mon-Fri) total.

    `override` replaces the weekly figure outright. `carry` is added only
    while the collection has entries; an empty collection always totals 0.
    Does not touch `carry` itself: see SummaryState.reconcile.
    """

    calc = calculator or StandardHoursCalculator()

    today_log = _find_by_date(logs, format_iso_date(today))
    daily = calc.hours(today_log) if today_log else 0

    if override is not None:
        return PeriodTotals(daily=daily, weekly=override)

    weekly = 0.0
    for day in week_days(today):
        if day.weekday() not in WORKDAYS:
            continue
        log = _find_by_date(logs, format_iso_date(day))
        if log:
            weekly += calc.hours(log)

    total = weekly + carry if logs else 0
    return PeriodTotals(daily=daily, weekly=round(total, 2))
