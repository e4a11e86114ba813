from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..common.validators import optional_clock, require_iso_date, require_non_negative_int
from ..core.exceptions import NotFoundError, ValidationError
from .model import LogEntry, LogForm
from .repository import LogRepository


class LogService:
    """Use cases on the signed-in user's log collection."""

    def __init__(self, logs: LogRepository):
        self._logs = logs

    def list_logs(self, user_id: int) -> Sequence[LogEntry]:
        return list(self._logs.list_for_user(int(user_id)))

    def get_log(self, user_id: int, log_id: int) -> LogEntry:
        entry = self._logs.get_by_id(int(user_id), int(log_id))
        if not entry:
            raise NotFoundError("Log entry not found")
        return entry

    @staticmethod
    def parse_form(data: Mapping) -> LogForm:
        work_date = require_iso_date(data.get("date", ""), "Date")
        t_in = optional_clock(data.get("time_in"), "Time in")
        t_out = optional_clock(data.get("time_out"), "Time out")
        break_minutes = require_non_negative_int(data.get("break_minutes"), "Break")

        if t_in and t_out:
            start = datetime.combine(work_date, t_in)
            end = datetime.combine(work_date, t_out)
            if end <= start:
                raise ValidationError("Time out must be after time in")
            span = int((end - start).total_seconds() // 60)
            if break_minutes > span:
                raise ValidationError("Break cannot be longer than the time worked")

        return LogForm(
            date=format_iso_date(work_date),
            time_in=t_in.strftime("%H:%M") if t_in else "",
            time_out=t_out.strftime("%H:%M") if t_out else "",
            break_minutes=break_minutes,
        )

    def save_log(self, user_id: int, data: Mapping, *, log_id: Optional[int] = None) -> int:
        """Create a new entry, or merge the form into entry `log_id`."""

        form = self.parse_form(data)
        same_day = self._logs.get_for_date(int(user_id), form.date)

        if log_id is None:
            if same_day:
                raise ValidationError(f"There is already a log for {form.date}")
            return self._logs.add(
                user_id=int(user_id),
                date=form.date,
                time_in=form.time_in,
                time_out=form.time_out,
                break_minutes=form.break_minutes,
            )

        current = self.get_log(user_id, log_id)
        if same_day and same_day.id != current.id:
            raise ValidationError(f"There is already a log for {form.date}")

        if not self._logs.update(user_id=int(user_id), log_id=int(log_id), fields=form.as_fields()):
            raise ValidationError("Updating the log failed")
        return int(log_id)

    def delete_log(self, user_id: int, log_id: int) -> int:
        """Delete an entry and return how many remain for the user."""

        if not self._logs.delete(user_id=int(user_id), log_id=int(log_id)):
            raise NotFoundError("Log entry not found")
        return self._logs.count_for_user(int(user_id))
