"""Prepare, bind, step, finalize.

One Statement wraps one sqlite3 cursor. The cursor is the native statement
resource and is closed on every exit path of ``prepare``.
"""

import logging
import operator
import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from typedstore.errors import ExecutionError
from typedstore.models import NULL, Blob, Float, Integer, Null, Row, Text, Value

logger = logging.getLogger(__name__)


def bind_native(value: Value):
    """Native parameter for one value.

    sqlite3 binds str and bytes with an explicit length and SQLITE_TRANSIENT,
    so the engine copies them. Integer and Float payloads are converted to
    their kind first, so Float(1) binds as a double.
    """
    if isinstance(value, Integer):
        return operator.index(value.value)
    if isinstance(value, Text):
        return value.value
    if isinstance(value, Float):
        return float(value.value)
    if isinstance(value, Null):
        return None
    if isinstance(value, Blob):
        return value.value
    raise TypeError(f"Not a bindable value: {value!r}")


def has_statement(sql: str) -> bool:
    """True if sql holds anything besides whitespace, comments and semicolons."""
    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch.isspace() or ch == ";":
            i += 1
        elif sql.startswith("--", i):
            end = sql.find("\n", i)
            i = len(sql) if end == -1 else end + 1
        elif sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            i = len(sql) if end == -1 else end + 2
        else:
            return True
    return False


def decode(native) -> Value:
    """Value for one column as reported by the engine."""
    if native is None:
        return NULL
    if isinstance(native, int):
        return Integer(native)
    if isinstance(native, str):
        return Text(native)
    if isinstance(native, float):
        return Float(native)
    if isinstance(native, bytes):
        return Blob(native)
    raise AssertionError(f"Engine returned a column outside the value kinds: {type(native).__name__}")


class Statement:
    def __init__(self, cursor: sqlite3.Cursor, sql: str, what: str):
        self._cursor = cursor
        self.sql = sql
        self.what = what

    def run(self, bindings: Sequence[Value] = ()) -> None:
        """Bind positionally and take the first step."""
        if not has_statement(self.sql):
            raise ExecutionError(self.what, "empty statement")
        params = [bind_native(v) for v in bindings]
        try:
            self._cursor.execute(self.sql, params)
        except OverflowError as e:
            raise ExecutionError(self.what, str(e)) from e
        except sqlite3.Error as e:
            logger.debug(f"{self.what}: {e} [{self.sql}]")
            raise ExecutionError.from_native(self.what, e) from e

    def step(self) -> Row | None:
        """Next decoded row, or None once the statement is complete."""
        try:
            native = self._cursor.fetchone()
        except sqlite3.Error as e:
            logger.debug(f"{self.what}: {e} [{self.sql}]")
            raise ExecutionError.from_native(self.what, e) from e
        if native is None:
            return None
        return tuple(decode(v) for v in native)

    def done(self) -> None:
        """Require completion with no rows produced."""
        if self.step() is not None:
            raise ExecutionError(self.what, "statement returned rows")

    def rows(self) -> list[Row]:
        out: list[Row] = []
        while True:
            row = self.step()
            if row is None:
                return out
            out.append(row)

    @property
    def column_count(self) -> int:
        return len(self._cursor.description or ())

    @property
    def last_rowid(self) -> int | None:
        return self._cursor.lastrowid


@contextmanager
def prepare(conn: sqlite3.Connection, sql: str, what: str) -> Iterator[Statement]:
    try:
        cursor = conn.cursor()
    except sqlite3.Error as e:
        raise ExecutionError.from_native(what, e) from e
    try:
        yield Statement(cursor, sql, what)
    finally:
        cursor.close()
