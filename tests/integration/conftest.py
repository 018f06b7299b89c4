import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from pid_digitizer.config.settings import Settings
from pid_digitizer.storage.connection import close_pool, ensure_schema, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "pid_digitizer_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    ensure_schema()
    with get_connection() as conn:
        yield conn


@pytest.fixture
def record_cleanup(db_conn: psycopg.Connection[Any]) -> Generator[list[str], None, None]:
    cleanup: list[str] = []
    yield cleanup
    with db_conn.cursor() as cur:
        for record_id in cleanup:
            cur.execute("DELETE FROM pid_records WHERE id = %s", (record_id,))
    db_conn.commit()
