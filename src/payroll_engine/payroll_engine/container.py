from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DEFAULT_MAX_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .payroll.mysql_policy_repository import MySQLPolicyRepository
from .payroll.service import PayrollService
from .salary.mysql_salary_repository import MySQLSalaryRepository
from .workdays.mysql_holiday_repository import MySQLHolidayRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    salary_repo: MySQLSalaryRepository
    attendance_repo: MySQLAttendanceRepository
    holiday_repo: MySQLHolidayRepository
    policy_repo: MySQLPolicyRepository

    payroll_service: PayrollService


def build_container(*, db_config: dict, company_id: int, max_workers: int = DEFAULT_MAX_WORKERS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config), pool_size=max_workers)

    salary_repo = MySQLSalaryRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    holiday_repo = MySQLHolidayRepository(conn)
    policy_repo = MySQLPolicyRepository(conn, company_id=company_id)

    payroll_service = PayrollService(
        salary_repo,
        attendance_repo,
        holiday_repo,
        policy_repo,
        max_workers=max_workers,
    )

    return Container(
        conn=conn,
        salary_repo=salary_repo,
        attendance_repo=attendance_repo,
        holiday_repo=holiday_repo,
        policy_repo=policy_repo,
        payroll_service=payroll_service,
    )
