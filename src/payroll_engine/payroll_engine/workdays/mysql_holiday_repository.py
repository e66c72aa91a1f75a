from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_holidays(self, year: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, name, category
                FROM holidays
                WHERE YEAR(holiday_date)=%s AND is_active=1
                ORDER BY holiday_date
                """,
                (int(year),),
            )
            rows = fetchall(cur)
            return [
                Holiday(date=r["holiday_date"], name=r["name"], category=r.get("category"))
                for r in rows
            ]
