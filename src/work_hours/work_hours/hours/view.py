from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.enums import SortOrder
from ..logs.model import LogEntry


@dataclass(frozen=True)
class LogFilters:
    """History filters. Empty string means the condition is not applied."""

    year: str = ""
    month: str = ""
    start_date: str = ""
    end_date: str = ""

    @classmethod
    def from_args(cls, args) -> "LogFilters":
        return cls(
            year=(args.get("year") or "").strip(),
            month=(args.get("month") or "").strip(),
            start_date=(args.get("start") or "").strip(),
            end_date=(args.get("end") or "").strip(),
        )

    @property
    def active(self) -> bool:
        return any((self.year, self.month, self.start_date, self.end_date))

    def matches(self, log: LogEntry) -> bool:
        if self.year and log.date[:4] != self.year:
            return False
        if self.month and log.date[5:7] != self.month:
            return False
        # yyyy-MM-dd strings compare chronologically.
        if self.start_date and log.date < self.start_date:
            return False
        if self.end_date and log.date > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class LogView:
    visible: list[LogEntry]
    years: list[str]
    months: list[str]


def view(logs: Sequence[LogEntry], sort: SortOrder = SortOrder.DESC, filters: LogFilters | None = None) -> LogView:
    filters = filters or LogFilters()

    # Computed from every log so the dropdowns do not shrink while filtering.
    years = sorted({log.date[:4] for log in logs}, reverse=True)
    months = sorted({log.date[5:7] for log in logs})

    visible = sorted(
        (log for log in logs if filters.matches(log)),
        key=lambda log: log.date,
        reverse=SortOrder.parse(sort) is SortOrder.DESC,
    )
    return LogView(visible=visible, years=years, months=months)
