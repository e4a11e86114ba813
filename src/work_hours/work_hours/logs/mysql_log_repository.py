from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, hhmm_or_null, mysql_date_to_iso, mysql_time_to_hhmm
from .model import LogEntry
from .repository import LogRepository

_COLUMNS = "log_id, user_id, work_date, time_in, time_out, break_minutes, created_at, updated_at"

# LogEntry field -> column
_UPDATABLE = {
    "date": "work_date",
    "time_in": "time_in",
    "time_out": "time_out",
    "break_minutes": "break_minutes",
}


def _to_entry(row: dict) -> LogEntry:
    return LogEntry(
        id=int(row["log_id"]),
        user_id=int(row["user_id"]),
        date=mysql_date_to_iso(row["work_date"]),
        time_in=mysql_time_to_hhmm(row.get("time_in")),
        time_out=mysql_time_to_hhmm(row.get("time_out")),
        break_minutes=int(row.get("break_minutes") or 0),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLLogRepository(LogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int) -> Sequence[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_logs WHERE user_id=%s", (int(user_id),))
            return [_to_entry(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: int, log_id: int) -> Optional[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_logs WHERE user_id=%s AND log_id=%s",
                (int(user_id), int(log_id)),
            )
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def get_for_date(self, user_id: int, date: str) -> Optional[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_logs WHERE user_id=%s AND work_date=%s",
                (int(user_id), date),
            )
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def add(self, *, user_id: int, date: str, time_in: str, time_out: str, break_minutes: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs(user_id, work_date, time_in, time_out, break_minutes, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,NOW(),NOW())
                """,
                (int(user_id), date, hhmm_or_null(time_in), hhmm_or_null(time_out), int(break_minutes)),
            )
            return int(cur.lastrowid)

    def update(self, *, user_id: int, log_id: int, fields: dict) -> bool:
        assignments: list[str] = []
        params: list[object] = []
        for key, value in fields.items():
            column = _UPDATABLE.get(key)
            if not column:
                continue
            if column in ("time_in", "time_out"):
                value = hhmm_or_null(value)
            assignments.append(f"{column}=%s")
            params.append(value)

        assignments.append("updated_at=NOW()")
        params.extend([int(user_id), int(log_id)])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE work_logs SET {', '.join(assignments)} WHERE user_id=%s AND log_id=%s",
                tuple(params),
            )
            # rowcount is 0 when nothing changed, so check existence separately.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM work_logs WHERE user_id=%s AND log_id=%s", (int(user_id), int(log_id)))
            return fetchone(cur) is not None

    def delete(self, *, user_id: int, log_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_logs WHERE user_id=%s AND log_id=%s", (int(user_id), int(log_id)))
            return cur.rowcount > 0

    def count_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS c FROM work_logs WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return int(row["c"]) if row else 0
