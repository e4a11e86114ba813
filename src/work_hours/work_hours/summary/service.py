from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import SortOrder
from ..hours.aggregator import aggregate
from ..hours.calculator.base import HoursCalculator
from ..hours.calculator.standard_calculator import StandardHoursCalculator
from ..hours.state import SummaryState
from ..hours.view import LogFilters, view
from ..logs.repository import LogRepository


@dataclass(frozen=True)
class Dashboard:
    daily: float
    weekly: float
    rows: list[dict]
    years: list[str]
    months: list[str]
    state: SummaryState
    has_logs: bool


class DashboardService:
    def __init__(self, logs: LogRepository, *, calculator: Optional[HoursCalculator] = None):
        self._logs = logs
        self._calculator = calculator or StandardHoursCalculator()

    def build(
        self,
        *,
        user_id: int,
        state: SummaryState,
        today: date,
        sort: SortOrder = SortOrder.DESC,
        filters: Optional[LogFilters] = None,
    ) -> Dashboard:
        """Summary figures and history for the dashboard.

        The returned `state` may differ from the one passed in (carry is
        dropped once the collection is empty); callers must store it.
        """

        logs = list(self._logs.list_for_user(int(user_id)))
        state = state.reconcile(logs)

        totals = aggregate(
            logs,
            today,
            override=state.weekly_override,
            carry=state.holiday_carry,
            calculator=self._calculator,
        )
        history = view(logs, sort, filters)

        return Dashboard(
            daily=totals.daily,
            weekly=totals.weekly,
            rows=[self._to_ui(log) for log in history.visible],
            years=history.years,
            months=history.months,
            state=state,
            has_logs=bool(logs),
        )

    def _to_ui(self, log) -> dict:
        hours = self._calculator.hours(log)
        return {
            "id": log.id,
            "date": log.date,
            "time_in": log.time_in or "-",
            "time_out": log.time_out or "-",
            "break_minutes": log.break_minutes,
            "hours": f"{hours:.2f}",
            "css_class": "text-danger" if hours < 0 else "",
        }
