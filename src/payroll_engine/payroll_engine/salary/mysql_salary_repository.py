from __future__ import annotations

from typing import Optional

from ..core.enums import ComponentKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SalaryComponent, SalaryStructure
from .repository import SalaryRepository


class MySQLSalaryRepository(SalaryRepository):
    """Reads the employee's current (latest effective) salary structure."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_salary_structure(self, employee_id: int) -> Optional[SalaryStructure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT structure_id
                FROM salary_structures
                WHERE employee_id=%s
                ORDER BY effective_from DESC, structure_id DESC
                LIMIT 1
                """,
                (int(employee_id),),
            )
            head = fetchone(cur)
            if not head:
                return None

            cur.execute(
                """
                SELECT name, monthly_amount, kind
                FROM salary_components
                WHERE structure_id=%s
                ORDER BY position, component_id
                """,
                (int(head["structure_id"]),),
            )
            rows = fetchall(cur)
            return SalaryStructure.from_components(
                SalaryComponent(
                    name=r["name"],
                    monthly_amount=r["monthly_amount"],
                    kind=ComponentKind(r["kind"]),
                )
                for r in rows
            )
