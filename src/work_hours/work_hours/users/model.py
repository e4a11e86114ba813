from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: the owner of a log collection.

    Note: plain data object, no DB access here.
    """

    user_id: int
    full_name: str
    username: str
    password_hash: str
    is_active: bool = True
