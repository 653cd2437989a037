import json as json_lib

import typer

from typedstore.lib.text import implode, uppercase
from typedstore.models import Blob, Null, Row, Value


def init_context(ctx: typer.Context, quiet_output: bool = False) -> None:
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["quiet_output"] = quiet_output


def is_quiet_mode(ctx: typer.Context) -> bool:
    return ctx.obj.get("quiet_output", False) if ctx.obj else False


def echo_text(msg: str, ctx: typer.Context) -> None:
    """Echo message only if not in quiet mode."""
    if not is_quiet_mode(ctx):
        typer.echo(msg)


def out_json(data) -> str:
    return json_lib.dumps(data, indent=2)


def format_value(value: Value, types: bool = False) -> str:
    if isinstance(value, Blob):
        text = value.value.hex()
    elif isinstance(value, Null):
        text = "NULL"
    else:
        text = str(value.value)
    if types:
        return f"{uppercase(value.kind)}:{text}"
    return text


def format_row(row: Row, types: bool = False) -> str:
    return implode((format_value(v, types) for v in row), "\t")


def value_json(value: Value) -> dict:
    payload = value.value.hex() if isinstance(value, Blob) else value.value
    return {"kind": value.kind, "value": payload}


def row_json(row: Row) -> list[dict]:
    return [value_json(v) for v in row]
