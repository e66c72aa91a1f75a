from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

import mysql.connector

from .connection import DBConfig


def _server_connect(config: DBConfig, *, with_database: bool):
    kwargs = config.connect_kwargs()
    if not with_database:
        kwargs.pop("database")
    return mysql.connector.connect(**kwargs)


def schema_statements(sql: str) -> Iterator[str]:
    """Statements of a .sql file, minus CREATE DATABASE / USE so any DB name works."""
    sql = re.sub(r"(?m)^\s*--.*$", "", sql)
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if not stmt or re.match(r"(?i)^(CREATE\s+DATABASE|USE)\b", stmt):
            continue
        yield stmt


def apply_schema(db_config: dict, *, schema_path: str | Path) -> list[str]:
    """Create the database (if needed) and the payroll input tables; returns table names."""
    config = DBConfig.from_mapping(db_config)

    conn = _server_connect(config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()

    sql = Path(schema_path).read_text(encoding="utf-8")
    conn = _server_connect(config, with_database=True)
    try:
        cur = conn.cursor()
        for stmt in schema_statements(sql):
            cur.execute(stmt)
        conn.commit()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> int:
    """Load demo rows; returns the number of statements executed."""
    config = DBConfig.from_mapping(db_config)
    sql = Path(seed_path).read_text(encoding="utf-8")
    conn = _server_connect(config, with_database=True)
    try:
        cur = conn.cursor()
        count = 0
        for stmt in schema_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
        return count
    finally:
        conn.close()
