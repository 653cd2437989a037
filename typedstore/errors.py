"""Error kinds surfaced by the store.

Every native engine failure is converted into one of these at the point of
detection. The native exception is kept as ``__cause__``.
"""

import sqlite3
import sys


class StoreError(Exception):
    """Base class for all store errors."""


class _NativeError(StoreError):
    def __init__(self, what: str, detail: str | None = None):
        self.what = what
        self.detail = detail
        super().__init__(f"{what} ({detail})" if detail else what)


class OpenError(_NativeError):
    """The datafile could not be replaced or opened."""


class ExecutionError(_NativeError):
    """Prepare, bind, or step failed."""

    def __init__(self, what: str, detail: str | None = None, errorname: str | None = None):
        self.errorname = errorname
        super().__init__(what, detail)

    @classmethod
    def from_native(cls, what: str, err: sqlite3.Error) -> "ExecutionError":
        return cls(what, str(err), getattr(err, "sqlite_errorname", None))


class NotFound(StoreError):
    """A query ran successfully but matched no rows."""


def install_error_handler():
    original_hook = sys.excepthook

    def error_hook(exc_type, exc_value, exc_traceback):
        if exc_type.__name__ not in ("Exit", "Abort", "KeyboardInterrupt"):
            print(f"{exc_type.__name__}: {str(exc_value)}", file=sys.stderr)

        original_hook(exc_type, exc_value, exc_traceback)

    sys.excepthook = error_hook


__all__ = [
    "StoreError",
    "OpenError",
    "ExecutionError",
    "NotFound",
    "install_error_handler",
]
