import logging
import sqlite3
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any

from typedstore import config
from typedstore.errors import ExecutionError, NotFound, OpenError
from typedstore.lib.text import implode, lowercase
from typedstore.models import Column, Row, Value, to_value
from typedstore.store import sqlite
from typedstore.store.statement import prepare

logger = logging.getLogger(__name__)

WRITE_ERROR = "Error writing to database"
READ_ERROR = "Error reading from database"

_SIDECARS = ("-journal", "-wal", "-shm")


class Mode(str, Enum):
    READ = "read"
    READWRITE = "readwrite"
    CREATE = "create"

    @classmethod
    def parse(cls, mode: "Mode | str") -> "Mode":
        if isinstance(mode, cls):
            return mode
        try:
            return cls(lowercase(str(mode)))
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown open mode '{mode}' (expected one of: {valid})") from None


_URI_MODES = {
    Mode.READ: "ro",
    Mode.READWRITE: "rwc",
    Mode.CREATE: "rwc",
}


def _replace(path: Path) -> None:
    """Delete an existing datafile and its journal files before a create."""
    targets = [path] + [path.with_name(path.name + suffix) for suffix in _SIDECARS]
    for target in targets:
        if not (target.exists() or target.is_symlink()):
            continue
        try:
            target.unlink()
        except OSError as e:
            raise OpenError("Could not overwrite file at path", f"{target}: {e.strerror or e}") from e
        logger.debug(f"Removed {target} for create")


class Connection:
    """One native SQLite handle, open from construction until close().

    Use as a context manager to release the handle at scope exit.
    """

    def __init__(
        self,
        path: Path | str,
        mode: Mode | str = Mode.READWRITE,
        *,
        pragmas: dict[str, Any] | None = None,
    ):
        self.mode = Mode.parse(mode)
        self.path = str(path) if sqlite.is_memory(path) else Path(path)
        self._conn: sqlite3.Connection | None = None

        if self.mode is Mode.CREATE and not sqlite.is_memory(self.path):
            _replace(self.path)

        if pragmas is None:
            pragmas = config.pragmas()
        try:
            self._conn = sqlite.connect(
                self.path,
                _URI_MODES[self.mode],
                pragmas,
                slow_after=config.slow_open_seconds(),
            )
        except sqlite3.Error as e:
            logger.debug(f"Open of {self.path} ({self.mode.value}) failed: {e}")
            raise OpenError("Could not open datafile", str(e)) from e
        logger.debug(f"Opened {self.path} ({self.mode.value})")

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<Connection {self.path} mode={self.mode.value} {state}>"

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug(f"Closed {self.path}")

    def execute(self, sql: str) -> None:
        """Run a statement with no parameters that yields no rows."""
        with self._prepare(sql, WRITE_ERROR) as stmt:
            stmt.run()
            stmt.done()

    def insert(self, table: str, columns: Iterable[Column | tuple[str, Any]]) -> int:
        """Insert one row and return its row id.

        Column names and the table name are interpolated into the statement
        text, so they must come from trusted code. Values are always bound.
        """
        cols = [Column(name, to_value(value)) for name, value in columns]
        if not cols:
            raise ExecutionError(WRITE_ERROR, f"no columns given for insert into {table}")
        for col in cols:
            if not col.name:
                raise ExecutionError(WRITE_ERROR, f"empty column name for insert into {table}")

        names = implode((c.name for c in cols), ", ")
        placeholders = implode(("?" for _ in cols), ", ")
        sql = f"INSERT INTO {table} ({names}) VALUES ({placeholders})"

        with self._prepare(sql, WRITE_ERROR) as stmt:
            stmt.run([c.value for c in cols])
            stmt.done()
            return stmt.last_rowid

    def query_all(self, sql: str, bindings: Sequence[Value | Any] = ()) -> list[Row]:
        """All rows in the order the engine produces them."""
        values = [to_value(b) for b in bindings]
        with self._prepare(sql, READ_ERROR) as stmt:
            stmt.run(values)
            return stmt.rows()

    def query_first(self, sql: str, bindings: Sequence[Value | Any] = ()) -> Row:
        rows = self.query_all(sql, bindings)
        if not rows:
            raise NotFound(f"No rows matched: {sql}")
        return rows[0]

    def _prepare(self, sql: str, what: str):
        if self._conn is None:
            raise ExecutionError(what, "connection is closed")
        return prepare(self._conn, sql, what)


def open(
    path: Path | str,
    mode: Mode | str = Mode.READWRITE,
    *,
    pragmas: dict[str, Any] | None = None,
) -> Connection:
    """Open or create a datafile."""
    return Connection(path, mode, pragmas=pragmas)
