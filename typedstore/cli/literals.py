"""Command-line value literals: int:7, float:1.5, text:hi, blob:00ff, null."""

from typedstore.lib.text import lowercase
from typedstore.models import NULL, Blob, Float, Integer, Text, Value


def parse(literal: str) -> Value:
    """Parse a literal. Unprefixed (or unknown prefix) literals are Text."""
    prefix, sep, payload = literal.partition(":")
    kind = lowercase(prefix)

    if not sep:
        return NULL if kind == "null" else Text(literal)
    if kind in ("int", "integer"):
        return Integer(int(payload))
    if kind in ("float", "real"):
        return Float(float(payload))
    if kind == "text":
        return Text(payload)
    if kind == "blob":
        return Blob(bytes.fromhex(payload))
    if kind == "null":
        if payload:
            raise ValueError(f"null literal takes no payload: {literal}")
        return NULL
    return Text(literal)


def parse_assignment(assignment: str) -> tuple[str, Value]:
    """Parse NAME=LITERAL."""
    name, sep, literal = assignment.partition("=")
    if not sep or not name:
        raise ValueError(f"Expected NAME=VALUE, got '{assignment}'")
    return name, parse(literal)
