from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import AttendanceDay
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_attendance(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, status, punch_in, punch_out, late_minutes, early_minutes, leave_approved
                FROM attendance_days
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (int(employee_id), start, end),
            )
            rows = fetchall(cur)
            return [self._to_day(r) for r in rows]

    @staticmethod
    def _to_day(r: dict) -> AttendanceDay:
        try:
            status = DayStatus(r["status"])
        except ValueError as exc:
            raise ValidationError(f"Unknown attendance status {r['status']!r} on {r['work_date']}") from exc
        return AttendanceDay(
            date=r["work_date"],
            status=status,
            punch_in=normalize_mysql_time(r.get("punch_in")),
            punch_out=normalize_mysql_time(r.get("punch_out")),
            late_minutes=int(r.get("late_minutes") or 0),
            early_minutes=int(r.get("early_minutes") or 0),
            leave_approved=bool(r.get("leave_approved")),
        )
