from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, MutableMapping, Optional, Sequence

from ..common.validators import require_number
from ..core.constants import SESSION_HOLIDAY_CARRY, SESSION_WEEKLY_OVERRIDE
from ..logs.model import LogEntry


@dataclass(frozen=True)
class SummaryState:
    """Per-session inputs of the weekly total that are not log entries.

    weekly_override: set by the user to replace the computed weekly hours.
    holiday_carry: saved public-holiday hours added on top of the week.

    Every transition returns a new state; the caller stores it. The carry
    is stored per user id.
    """

    weekly_override: Optional[float] = None
    holiday_carry: float = 0.0

    def set_holiday_hours(self, hours) -> "SummaryState":
        value = require_number(hours, "Holiday hours")
        return replace(self, holiday_carry=round(self.holiday_carry + value, 2), weekly_override=None)

    def set_weekly_hours(self, hours) -> "SummaryState":
        value = require_number(hours, "Weekly hours", allow_negative=True)
        return replace(self, weekly_override=value)

    def logs_changed(self) -> "SummaryState":
        return replace(self, weekly_override=None)

    def collection_emptied(self) -> "SummaryState":
        return replace(self, holiday_carry=0.0)

    def reconcile(self, logs: Sequence[LogEntry]) -> "SummaryState":
        if not logs and self.holiday_carry:
            return self.collection_emptied()
        return self

    @classmethod
    def load(cls, store: Mapping, user_id: int) -> "SummaryState":
        carries = store.get(SESSION_HOLIDAY_CARRY)
        carry = carries.get(str(user_id)) if isinstance(carries, Mapping) else None
        try:
            carry = float(carry or 0)
        except (TypeError, ValueError):
            carry = 0.0
        override = store.get(SESSION_WEEKLY_OVERRIDE)
        return cls(
            weekly_override=float(override) if override is not None else None,
            holiday_carry=carry,
        )

    def save(self, store: MutableMapping, user_id: int) -> None:
        # Carry is kept per user id; session keys must be strings.
        carries = store.get(SESSION_HOLIDAY_CARRY)
        carries = dict(carries) if isinstance(carries, Mapping) else {}
        if self.holiday_carry:
            carries[str(user_id)] = self.holiday_carry
        else:
            carries.pop(str(user_id), None)
        store[SESSION_HOLIDAY_CARRY] = carries

        if self.weekly_override is None:
            store.pop(SESSION_WEEKLY_OVERRIDE, None)
        else:
            store[SESSION_WEEKLY_OVERRIDE] = self.weekly_override
