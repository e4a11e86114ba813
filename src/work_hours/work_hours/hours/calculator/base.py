from __future__ import annotations

from abc import ABC, abstractmethod

from ...logs.model import LogEntry


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def hours(self, entry: LogEntry) -> float:
        raise NotImplementedError

    def __call__(self, entry: LogEntry) -> float:
        return self.hours(entry)
