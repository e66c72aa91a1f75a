from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)

# mysql-connector refuses pools above this size.
_MAX_POOL_SIZE = 32


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "payroll_db")),
        )

    def connect_kwargs(self) -> dict:
        return dict(host=self.host, port=self.port, user=self.user, password=self.password, database=self.database)


class DatabaseConnection:
    """Process-wide connection factory backed by a mysql-connector pool.

    Every repository call borrows one connection and ``close()`` hands it
    back, so payroll workers on different threads never share a connection.
    """

    _instance: Optional["DatabaseConnection"] = None
    _instance_lock = threading.Lock()

    def __init__(self, config: DBConfig, *, pool_size: int = DEFAULT_MAX_WORKERS):
        self._config = config
        self._pool_size = min(max(1, int(pool_size)), _MAX_POOL_SIZE)
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()

    @classmethod
    def get_instance(cls, config: DBConfig, *, pool_size: int = DEFAULT_MAX_WORKERS) -> "DatabaseConnection":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = DatabaseConnection(config, pool_size=pool_size)
            return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def pool_size(self) -> int:
        return self._pool_size

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._pool_lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="payroll_pool",
                    pool_size=self._pool_size,
                    pool_reset_session=True,
                    **self._config.connect_kwargs(),
                )
            return self._pool

    def connect(self):
        try:
            return self._get_pool().get_connection()
        except errors.PoolError:
            # More workers than pooled connections: open a one-off connection.
            logger.debug("Connection pool exhausted (size=%d), opening a direct connection", self._pool_size)
            return mysql.connector.connect(**self._config.connect_kwargs())
