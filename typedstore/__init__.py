"""Typed values over an embedded SQLite datafile.

    with typedstore.open("words.db", "create") as db:
        db.execute("CREATE TABLE t (a INTEGER, b TEXT)")
        db.insert("t", [("a", Integer(7)), ("b", Text("hi"))])
        rows = db.query_all("SELECT a, b FROM t")
"""

from typedstore.errors import ExecutionError, NotFound, OpenError, StoreError
from typedstore.models import (
    NULL,
    Blob,
    Column,
    Float,
    Integer,
    Null,
    Row,
    Text,
    Value,
    to_value,
    unwrap,
)
from typedstore.store import Connection, Mode, open

__version__ = "0.1.0"

__all__ = [
    "open",
    "Connection",
    "Mode",
    "Integer",
    "Text",
    "Float",
    "Null",
    "Blob",
    "NULL",
    "Value",
    "Column",
    "Row",
    "to_value",
    "unwrap",
    "StoreError",
    "OpenError",
    "ExecutionError",
    "NotFound",
]
