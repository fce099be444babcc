"""A single MySQL connection with a row cursor over the last query."""

from __future__ import annotations

import time
from typing import Any, Iterator

import pymysql


class MysqlConnection:
    """Wraps one MySQL connection; results are walked with ``next``/``value``."""

    def __init__(self) -> None:
        self._conn: Any = None
        self._rows: Iterator[tuple] | None = None
        self._row: tuple | None = None
        self._field_count = 0
        self._alive = time.monotonic()

    def __enter__(self) -> MysqlConnection:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def connect(self, user: str, password: str, db_name: str, ip: str, port: int = 3306) -> bool:
        """Open the connection; return whether it succeeded."""
        try:
            self._conn = pymysql.connect(
                host=ip,
                port=port,
                user=user,
                password=password,
                database=db_name,
                charset="utf8",
                autocommit=True,
            )
        except pymysql.MySQLError:
            self._conn = None
            return False
        return True

    def update(self, sql: str) -> bool:
        """Run a statement that returns no rows."""
        if self._conn is None:
            return False
        try:
            with self._conn.cursor() as cursor:
                cursor.execute(sql)
        except pymysql.MySQLError:
            return False
        return True

    def query(self, sql: str) -> bool:
        """Run a query and keep its rows for ``next``/``value``."""
        self._free_result()
        if self._conn is None:
            return False
        try:
            with self._conn.cursor() as cursor:
                cursor.execute(sql)
                self._field_count = len(cursor.description or ())
                self._rows = iter(list(cursor.fetchall()))
        except pymysql.MySQLError:
            self._free_result()
            return False
        return True

    def next(self) -> bool:
        """Move to the next row; False when there is none."""
        if self._rows is None:
            return False
        self._row = next(self._rows, None)
        return self._row is not None

    def value(self, index: int) -> str:
        """Text of a field of the current row, or '' when out of range."""
        if self._row is None or not 0 <= index < self._field_count:
            return ""
        field = self._row[index]
        if field is None:
            return ""
        if isinstance(field, (bytes, bytearray)):
            return bytes(field).decode("utf-8", errors="replace")
        return str(field)

    def transaction(self) -> bool:
        """Turn off autocommit."""
        if self._conn is None:
            return False
        try:
            self._conn.autocommit(False)
        except pymysql.MySQLError:
            return False
        return True

    def _finish(self, action) -> bool:
        if self._conn is None:
            return False
        try:
            action()
        except pymysql.MySQLError:
            return False
        finally:
            try:
                self._conn.autocommit(True)
            except pymysql.MySQLError:
                pass
        return True

    def commit(self) -> bool:
        """Commit and turn autocommit back on."""
        return self._finish(lambda: self._conn.commit())

    def rollback(self) -> bool:
        """Roll back and turn autocommit back on."""
        return self._finish(lambda: self._conn.rollback())

    def refresh_alive_time(self) -> None:
        self._alive = time.monotonic()

    def alive_time(self) -> int:
        """Milliseconds since the alive time was last refreshed."""
        return int((time.monotonic() - self._alive) * 1000)

    def close(self) -> None:
        self._free_result()
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _free_result(self) -> None:
        self._rows = None
        self._row = None
        self._field_count = 0