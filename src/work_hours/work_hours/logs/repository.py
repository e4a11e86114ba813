from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LogEntry


class LogRepository(Protocol):
    """Repository interface for a user's log collection.

    Note: the service layer depends on this interface, not on a concrete DB.
    """

    def list_for_user(self, user_id: int) -> Sequence[LogEntry]:
        raise NotImplementedError

    def get_by_id(self, user_id: int, log_id: int) -> Optional[LogEntry]:
        raise NotImplementedError

    def get_for_date(self, user_id: int, date: str) -> Optional[LogEntry]:
        raise NotImplementedError

    def add(self, *, user_id: int, date: str, time_in: str, time_out: str, break_minutes: int) -> int:
        raise NotImplementedError

    def update(self, *, user_id: int, log_id: int, fields: dict) -> bool:
        """Merge `fields` into the stored entry; untouched columns keep their value."""

        raise NotImplementedError

    def delete(self, *, user_id: int, log_id: int) -> bool:
        raise NotImplementedError

    def count_for_user(self, user_id: int) -> int:
        raise NotImplementedError
