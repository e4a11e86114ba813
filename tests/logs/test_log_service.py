from __future__ import annotations

import pytest

from src.work_hours.work_hours.core.exceptions import NotFoundError, ValidationError
from src.work_hours.work_hours.logs.service import LogService
from tests.fakes import FakeLogsRepo


def _form(date="2026-03-09", time_in="09:00", time_out="17:00", break_minutes="30"):
    return {"date": date, "time_in": time_in, "time_out": time_out, "break_minutes": break_minutes}


def test_add_then_list():
    svc = LogService(FakeLogsRepo())
    log_id = svc.save_log(1, _form())

    [entry] = svc.list_logs(1)
    assert entry.id == log_id
    assert (entry.date, entry.time_in, entry.time_out, entry.break_minutes) == ("2026-03-09", "09:00", "17:00", 30)
    assert svc.list_logs(2) == []


def test_times_are_optional_and_break_defaults_to_zero():
    svc = LogService(FakeLogsRepo())
    svc.save_log(1, _form(time_in="", time_out="", break_minutes=""))
    [entry] = svc.list_logs(1)
    assert entry.time_in == ""
    assert entry.break_minutes == 0


@pytest.mark.parametrize(
    "form,message",
    [
        (_form(date=""), "Date is required"),
        (_form(date="09/03/2026"), "Date must be a date"),
        (_form(time_in="9h"), "Time in must be a time"),
        (_form(break_minutes="-5"), "Break cannot be negative"),
        (_form(time_in="17:00", time_out="09:00"), "Time out must be after time in"),
        (_form(time_in="09:00", time_out="10:00", break_minutes="90"), "Break cannot be longer"),
    ],
)
def test_invalid_forms_are_rejected(form, message):
    with pytest.raises(ValidationError) as exc:
        LogService.parse_form(form)
    assert message in str(exc.value)


def test_one_log_per_day():
    svc = LogService(FakeLogsRepo())
    svc.save_log(1, _form())
    with pytest.raises(ValidationError):
        svc.save_log(1, _form(time_in="10:00"))
    # another user may log the same day
    svc.save_log(2, _form())


def test_edit_merges_into_existing_entry():
    repo = FakeLogsRepo()
    svc = LogService(repo)
    log_id = svc.save_log(1, _form())

    svc.save_log(1, _form(time_out="18:00", break_minutes="0"), log_id=log_id)

    entry = svc.get_log(1, log_id)
    assert entry.time_out == "18:00"
    assert entry.break_minutes == 0
    assert entry.created_at is not None
    assert entry.updated_at is not None


def test_edit_cannot_move_onto_another_days_log():
    svc = LogService(FakeLogsRepo())
    svc.save_log(1, _form(date="2026-03-09"))
    second = svc.save_log(1, _form(date="2026-03-10"))
    with pytest.raises(ValidationError):
        svc.save_log(1, _form(date="2026-03-09"), log_id=second)


def test_edit_of_foreign_or_missing_log_fails():
    svc = LogService(FakeLogsRepo())
    log_id = svc.save_log(1, _form())
    with pytest.raises(NotFoundError):
        svc.save_log(2, _form(date="2026-03-10"), log_id=log_id)
    with pytest.raises(NotFoundError):
        svc.get_log(1, 999)


def test_delete_returns_remaining_count():
    svc = LogService(FakeLogsRepo())
    first = svc.save_log(1, _form(date="2026-03-09"))
    second = svc.save_log(1, _form(date="2026-03-10"))

    assert svc.delete_log(1, first) == 1
    assert svc.delete_log(1, second) == 0
    with pytest.raises(NotFoundError):
        svc.delete_log(1, second)
