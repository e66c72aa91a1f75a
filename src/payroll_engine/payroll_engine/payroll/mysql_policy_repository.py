from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json
from .factory import OrganizationPolicyFactory
from .model import OrganizationPolicy
from .repository import PolicyRepository


class MySQLPolicyRepository(PolicyRepository):
    """Organization settings are one JSON document per company."""

    def __init__(
        self,
        conn_factory: DatabaseConnection,
        *,
        company_id: int,
        factory: Optional[OrganizationPolicyFactory] = None,
    ):
        self._conn_factory = conn_factory
        self._company_id = int(company_id)
        self._factory = factory or OrganizationPolicyFactory()

    def get_organization_policy(self) -> OrganizationPolicy:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT settings FROM organization_settings WHERE company_id=%s",
                (self._company_id,),
            )
            row = fetchone(cur)
        settings = load_json(row["settings"]) if row else {}
        return self._factory.from_settings(settings)
