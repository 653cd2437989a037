import logging
import sqlite3
import time
from pathlib import Path
from typing import Any
from urllib.parse import quote

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


def is_memory(path: Path | str) -> bool:
    return str(path) == MEMORY


def uri(path: Path | str, uri_mode: str) -> str:
    return f"file:{quote(Path(path).as_posix())}?mode={uri_mode}"


def pragma_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "ON" if value else "OFF"
    return str(value)


def connect(path: Path | str, uri_mode: str, pragmas: dict[str, Any], slow_after: float = 0.1):
    """Open a native SQLite handle in the given URI mode (ro, rw, rwc).

    The header probe forces SQLite to read the file so that a path that is
    not a database fails here instead of on first use. Raises sqlite3.Error.
    """
    start = time.perf_counter()

    if is_memory(path):
        conn = sqlite3.connect(MEMORY)
    else:
        conn = sqlite3.connect(uri(path, uri_mode), uri=True)
    conn.isolation_level = None
    conn.text_factory = str

    try:
        conn.execute("PRAGMA schema_version").close()
        for name, value in pragmas.items():
            conn.execute(f"PRAGMA {name} = {pragma_literal(value)}").close()
    except sqlite3.Error:
        conn.close()
        raise

    elapsed = time.perf_counter() - start
    if elapsed > slow_after:
        logger.warning(f"SQLite open of {path} took {elapsed:.3f}s (possible lock contention)")

    return conn
