from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        full_name=row["full_name"],
        username=row["username"],
        password_hash=row["password_hash"],
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, value) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT user_id, full_name, username, password_hash, is_active
                FROM users
                WHERE {where}=%s
                """,
                (value,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("user_id", int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)
