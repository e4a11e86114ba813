from __future__ import annotations

from enum import Enum


class SortOrder(str, Enum):
    """Direction of the log history list."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.DESC

    def toggled(self) -> "SortOrder":
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC
