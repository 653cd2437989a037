"""Typed access to a SQLite datafile."""

from typedstore.store.connection import Connection, Mode, open
from typedstore.store.statement import bind_native, decode, prepare

__all__ = [
    "Connection",
    "Mode",
    "open",
    "prepare",
    "bind_native",
    "decode",
]
