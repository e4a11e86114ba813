from datetime import date

import pytest

from src.work_hours.work_hours.core.exceptions import ValidationError
from src.work_hours.work_hours.holidays.calculator import PublicHolidayPayCalculator
from tests.fakes import log


def test_one_fifth_of_average_week():
    calc = PublicHolidayPayCalculator()
    assert calc.holiday_hours(150) == 6.0
    assert calc.holiday_hours("100") == 4.0


def test_from_total_rejects_bad_input():
    calc = PublicHolidayPayCalculator()
    with pytest.raises(ValidationError):
        calc.from_total("")
    with pytest.raises(ValidationError):
        calc.from_total("-10")


def test_reference_period_is_five_weeks_before_holiday():
    start, end = PublicHolidayPayCalculator().reference_period(date(2026, 3, 17))
    assert start == date(2026, 2, 10)
    assert end == date(2026, 3, 16)


def test_from_logs_only_counts_reference_period():
    logs = [
        log("2026-02-09", "09:00", "17:00", 0),  # before
        log("2026-02-10", "09:00", "17:00", 0),
        log("2026-03-16", "09:00", "17:00", 0),
        log("2026-03-17", "09:00", "17:00", 0),  # the holiday itself
    ]
    result = PublicHolidayPayCalculator().from_logs(logs, date(2026, 3, 17))
    assert result.reference_start == "2026-02-10"
    assert result.reference_end == "2026-03-16"
    assert result.total_hours == 16
    assert result.holiday_hours == 0.64


def test_from_logs_never_negative():
    logs = [log("2026-03-02", "17:00", "09:00", 0)]
    result = PublicHolidayPayCalculator().from_logs(logs, date(2026, 3, 17))
    assert result.total_hours == 0
    assert result.holiday_hours == 0
