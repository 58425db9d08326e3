from __future__ import annotations

from datetime import time, timedelta
from pathlib import Path

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.geo_attendance.geo_attendance.core.exceptions import DuplicateRecordError, StorageError
from src.geo_attendance.geo_attendance.database.bootstrap import iter_sql_statements
from src.geo_attendance.geo_attendance.database.mysql_base import db_cursor, normalize_mysql_time

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


class FakeCursor:
    def __init__(self, error=None):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self._error:
            raise self._error

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, error=None):
        self._conn = conn
        self._error = error

    def connect(self):
        if self._error:
            raise self._error
        return self._conn


def test_db_cursor_commits_and_closes():
    conn = FakeConn(FakeCursor())
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and conn.closed and not conn.rolled_back


def test_duplicate_key_becomes_duplicate_record_error():
    err = mysql.connector.IntegrityError(msg="Duplicate entry '1-2025-03-10'", errno=errorcode.ER_DUP_ENTRY)
    conn = FakeConn(FakeCursor(err))

    with pytest.raises(DuplicateRecordError):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert conn.rolled_back and conn.closed and not conn.committed


def test_other_driver_errors_become_storage_error():
    err = mysql.connector.IntegrityError(msg="Cannot add a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    conn = FakeConn(FakeCursor(err))

    with pytest.raises(StorageError) as exc:
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert not isinstance(exc.value, DuplicateRecordError)


def test_connection_failure_is_storage_error():
    with pytest.raises(StorageError):
        with db_cursor(FakeFactory(error=mysql.connector.InterfaceError(msg="Can't connect"))):
            pass


@pytest.mark.parametrize(
    "value, expected",
    [
        (time(7, 30), time(7, 30)),
        (timedelta(hours=13, minutes=30, seconds=5), time(13, 30, 5)),
        ("07:00:00", time(7, 0)),
        ("07:15", time(7, 15)),
        (None, None),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


def test_schema_splits_into_statements():
    statements = list(iter_sql_statements(SCHEMA.read_text(encoding="utf-8")))

    assert len(statements) == 5
    assert all(not s.startswith("--") for s in statements)
    assert any("uq_attendance_user_day (user_id, work_date)" in s for s in statements)


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'SELECT "x;y"']


class DroppedConn(FakeConn):
    """Connection that died mid-query: rollback and close fail too."""

    def rollback(self):
        raise mysql.connector.OperationalError(msg="MySQL Connection not available")

    def close(self):
        raise mysql.connector.OperationalError(msg="MySQL Connection not available")


def test_lost_connection_is_storage_error_even_if_rollback_fails():
    err = mysql.connector.OperationalError(msg="Lost connection to MySQL server during query", errno=errorcode.CR_SERVER_LOST)
    conn = DroppedConn(FakeCursor(err))

    with pytest.raises(StorageError) as exc:
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("SELECT 1")

    assert "Lost connection" in str(exc.value)


def test_duplicate_key_survives_failed_rollback():
    err = mysql.connector.IntegrityError(msg="Duplicate entry '1-2025-03-10'", errno=errorcode.ER_DUP_ENTRY)

    with pytest.raises(DuplicateRecordError):
        with db_cursor(FakeFactory(DroppedConn(FakeCursor(err)))) as (_, cur):
            cur.execute("INSERT ...")
