from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..common.validators import require_number
from ..core.constants import HOLIDAY_ENTITLEMENT_FRACTION, HOLIDAY_REFERENCE_WEEKS
from ..hours.calculator.base import HoursCalculator
from ..hours.calculator.standard_calculator import StandardHoursCalculator
from ..logs.model import LogEntry


@dataclass(frozen=True)
class HolidayPay:
    reference_start: Optional[str]
    reference_end: Optional[str]
    total_hours: float
    holiday_hours: float


class PublicHolidayPayCalculator:
    """Public holiday entitlement for part-time work.

    A public holiday is worth one fifth of the average weekly hours worked
    in the five weeks that end the day before the holiday.
    """

    def __init__(
        self,
        *,
        calculator: Optional[HoursCalculator] = None,
        reference_weeks: int = HOLIDAY_REFERENCE_WEEKS,
        fraction: int = HOLIDAY_ENTITLEMENT_FRACTION,
    ):
        self._calculator = calculator or StandardHoursCalculator()
        self._weeks = int(reference_weeks)
        self._fraction = int(fraction)

    def holiday_hours(self, total_hours) -> float:
        total = require_number(total_hours, "Total hours")
        return round(total / self._weeks / self._fraction, 2)

    def reference_period(self, holiday: date) -> tuple[date, date]:
        end = holiday - timedelta(days=1)
        start = holiday - timedelta(weeks=self._weeks)
        return start, end

    def hours_in_reference_period(self, logs: Sequence[LogEntry], holiday: date) -> float:
        start, end = (format_iso_date(d) for d in self.reference_period(holiday))
        return sum(self._calculator.hours(log) for log in logs if start <= log.date <= end)

    def from_total(self, total_hours) -> HolidayPay:
        total = require_number(total_hours, "Total hours")
        return HolidayPay(
            reference_start=None,
            reference_end=None,
            total_hours=round(total, 2),
            holiday_hours=self.holiday_hours(total),
        )

    def from_logs(self, logs: Sequence[LogEntry], holiday: date) -> HolidayPay:
        start, end = self.reference_period(holiday)
        # Total is floored at zero.
        total = max(self.hours_in_reference_period(logs, holiday), 0.0)
        return HolidayPay(
            reference_start=format_iso_date(start),
            reference_end=format_iso_date(end),
            total_hours=round(total, 2),
            holiday_hours=self.holiday_hours(total),
        )
