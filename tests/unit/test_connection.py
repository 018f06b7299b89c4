from unittest.mock import MagicMock, patch

import pytest
from psycopg.conninfo import conninfo_to_dict

from pid_digitizer.config.settings import Settings
from pid_digitizer.storage import connection
from pid_digitizer.storage.connection import (
    RECORDS_TABLE_DDL,
    build_conninfo,
    close_pool,
    ensure_schema,
    get_connection,
    init_pool,
)


class TestBuildConninfo:
    def test_uses_db_settings(self) -> None:
        settings = Settings(
            db_host="db.internal",
            db_port=6543,
            db_database="records",
            db_username="digitizer",
            db_password="p@ss word",
        )
        assert conninfo_to_dict(build_conninfo(settings)) == {
            "host": "db.internal",
            "port": "6543",
            "dbname": "records",
            "user": "digitizer",
            "password": "p@ss word",
        }


class TestPoolLifecycle:
    def test_get_connection_requires_pool(self) -> None:
        close_pool()
        with pytest.raises(RuntimeError, match="not initialized"):
            with get_connection():
                pass

    def test_init_and_close(self) -> None:
        with patch("pid_digitizer.storage.connection.ConnectionPool") as pool_cls:
            init_pool(Settings())
            assert connection._pool is pool_cls.return_value
            close_pool()
        pool_cls.return_value.close.assert_called_once()
        assert connection._pool is None


class TestEnsureSchema:
    def test_creates_records_table(self) -> None:
        conn = MagicMock()
        ctx = MagicMock()
        ctx.__enter__.return_value = conn
        with patch("pid_digitizer.storage.connection.get_connection", return_value=ctx):
            ensure_schema()
        conn.execute.assert_called_once_with(RECORDS_TABLE_DDL)
        conn.commit.assert_called_once()
