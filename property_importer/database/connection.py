from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from property_importer.config.settings import Settings


def build_conninfo(settings: Settings) -> str:
    """Connection string with the configured connect and statement timeouts."""
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=settings.db_connect_timeout_seconds,
        options=f"-c statement_timeout={settings.db_statement_timeout_ms}",
    )


class Database:
    """Owns the connection pool; handed to repositories explicitly."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        pool = ConnectionPool(
            build_conninfo(settings),
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            timeout=settings.db_connect_timeout_seconds,
            open=True,
        )
        return cls(pool)

    def close(self) -> None:
        self._pool.close()

    @contextmanager
    def connection(self) -> Generator[psycopg.Connection[Any], None, None]:
        """Yield a pooled connection. Caller manages commit; errors roll back."""
        with self._pool.connection() as conn:
            yield conn
