import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from property_importer.config.settings import Settings
from property_importer.database.connection import Database

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "migrations"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "properties_test")
    return Settings(db_pool_min_size=0, db_connect_timeout_seconds=3)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def database(test_settings: Settings) -> Generator[Database, None, None]:
    db = Database.from_settings(test_settings)
    try:
        with db.connection() as conn:
            for migration in sorted(MIGRATIONS_DIR.glob("*.sql")):
                conn.execute(migration.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        db.close()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to point at one.")
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_conn(database: Database) -> Generator[psycopg.Connection[Any], None, None]:
    with database.connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(database: Database) -> Generator[list[int], None, None]:
    property_ids: list[int] = []
    yield property_ids
    if not property_ids:
        return
    with database.connection() as conn:
        conn.execute("DELETE FROM properties WHERE id = ANY(%s)", (property_ids,))
        conn.commit()
