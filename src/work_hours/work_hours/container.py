from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DatabaseConnection, DBConfig
from .holidays.calculator import PublicHolidayPayCalculator
from .hours.calculator.base import HoursCalculator
from .hours.calculator.standard_calculator import StandardHoursCalculator
from .logs.mysql_log_repository import MySQLLogRepository
from .logs.repository import LogRepository
from .logs.service import LogService
from .summary.service import DashboardService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    logs_repo: LogRepository

    auth_service: AuthService
    log_service: LogService
    dashboard_service: DashboardService
    holiday_calculator: PublicHolidayPayCalculator

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    users_repo: UserRepository,
    logs_repo: LogRepository,
    calculator: Optional[HoursCalculator] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    calculator = calculator or StandardHoursCalculator()
    return Container(
        users_repo=users_repo,
        logs_repo=logs_repo,
        auth_service=AuthService(users_repo),
        log_service=LogService(logs_repo),
        dashboard_service=DashboardService(logs_repo, calculator=calculator),
        holiday_calculator=PublicHolidayPayCalculator(calculator=calculator),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        users_repo=MySQLUserRepository(conn),
        logs_repo=MySQLLogRepository(conn),
        conn=conn,
    )
