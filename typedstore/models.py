"""Value, Column and Row types.

A Value is exactly one of five kinds. No coercion happens here; the engine's
type affinity decides what comes back out of a column.
"""

from dataclasses import dataclass
from typing import ClassVar, NamedTuple, Union


@dataclass(frozen=True)
class Integer:
    value: int
    kind: ClassVar[str] = "integer"


@dataclass(frozen=True)
class Text:
    value: str
    kind: ClassVar[str] = "text"


@dataclass(frozen=True)
class Float:
    value: float
    kind: ClassVar[str] = "float"


@dataclass(frozen=True)
class Null:
    value: None = None
    kind: ClassVar[str] = "null"


@dataclass(frozen=True)
class Blob:
    value: bytes
    kind: ClassVar[str] = "blob"

    def __post_init__(self):
        if not isinstance(self.value, bytes):
            object.__setattr__(self, "value", bytes(self.value))


Value = Union[Integer, Text, Float, Null, Blob]

KINDS: tuple[type, ...] = (Integer, Text, Float, Null, Blob)

NULL = Null()


class Column(NamedTuple):
    """A named value for insert. The name is interpolated into SQL text."""

    name: str
    value: Value


Row = tuple[Value, ...]


def is_value(obj) -> bool:
    return isinstance(obj, KINDS)


def to_value(obj) -> Value:
    """Lift a native Python object into the matching Value kind.

    Values pass through unchanged. bool is an Integer, bytearray and
    memoryview are Blobs. Anything else raises TypeError.
    """
    if is_value(obj):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, int):
        return Integer(int(obj))
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Blob(bytes(obj))
    raise TypeError(f"No value kind for {type(obj).__name__}: {obj!r}")


def unwrap(row: Row) -> tuple:
    """Native payloads of a row, in column order."""
    return tuple(v.value for v in row)


__all__ = [
    "Integer",
    "Text",
    "Float",
    "Null",
    "Blob",
    "Value",
    "KINDS",
    "NULL",
    "Column",
    "Row",
    "is_value",
    "to_value",
    "unwrap",
]
