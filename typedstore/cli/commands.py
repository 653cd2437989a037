"""typedstore CLI: run statements against a datafile from the shell."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from typedstore import config, store
from typedstore.cli import literals, output
from typedstore.cli.errors import error_feedback
from typedstore.errors import install_error_handler
from typedstore.lib.progress import Progress
from typedstore.lib.text import implode, split
from typedstore.models import Column, Text
from typedstore.store import Mode

app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
):
    """Typed access to SQLite datafiles."""
    output.init_context(ctx, quiet_output)
    level = logging.DEBUG if verbose else config.log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("exec")
@error_feedback
def exec_statement(
    db: Path = typer.Argument(..., help="Datafile path"),
    sql: str = typer.Argument(..., help="Statement with no parameters and no result rows"),
):
    """Run one statement (DDL, PRAGMA, ...) in readwrite mode."""
    with store.open(db, Mode.READWRITE) as conn:
        conn.execute(sql)


@app.command("insert")
@error_feedback
def insert(
    db: Path = typer.Argument(..., help="Datafile path"),
    table: str = typer.Argument(..., help="Target table"),
    assignments: list[str] = typer.Argument(..., help="NAME=LITERAL pairs"),
):
    """Insert one row and print its row id.

    Example:
      typedstore insert words.db words text=text:hello count=int:3
    """
    columns = [Column(*literals.parse_assignment(a)) for a in assignments]
    with store.open(db, Mode.READWRITE) as conn:
        rowid = conn.insert(table, columns)
    typer.echo(rowid)


@app.command("query")
@error_feedback
def query(
    db: Path = typer.Argument(..., help="Datafile path"),
    sql: str = typer.Argument(..., help="Query text with ? placeholders"),
    bind: Annotated[
        list[str] | None, typer.Option("--bind", "-b", help="Positional binding literal")
    ] = None,
    first: bool = typer.Option(False, "--first", help="Only the first row; exit 2 if none."),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    types: bool = typer.Option(False, "--types", "-t", help="Prefix values with their kind."),
):
    """Run a query read-only and print its rows.

    Example:
      typedstore query words.db "SELECT * FROM words WHERE count > ?" -b int:2
    """
    bindings = [literals.parse(b) for b in bind or []]
    with store.open(db, Mode.READ) as conn:
        if first:
            rows = [conn.query_first(sql, bindings)]
        else:
            rows = conn.query_all(sql, bindings)

    if json_output:
        typer.echo(output.out_json([output.row_json(r) for r in rows]))
        return
    for row in rows:
        typer.echo(output.format_row(row, types))


@app.command("import")
@error_feedback
def import_file(
    ctx: typer.Context,
    db: Path = typer.Argument(..., help="Datafile path"),
    table: str = typer.Argument(..., help="Target table"),
    source: Path = typer.Argument(..., help="Delimited text file; first line is the header"),
    delimiter: str = typer.Option(",", "--delimiter", "-d", help="Field delimiter"),
    create: bool = typer.Option(False, "--create", help="Create the table from the header first."),
):
    """Insert every line of a delimited file as text values."""
    lines = source.read_text(encoding="utf-8").splitlines()
    if not lines:
        raise ValueError(f"{source} is empty")

    header = split(lines[0], delimiter)
    if not header:
        raise ValueError(f"{source} has an empty header line")
    records = [split(line, delimiter) for line in lines[1:] if line]

    with store.open(db, Mode.READWRITE) as conn:
        if create:
            conn.execute(f"CREATE TABLE {table} ({implode(header, ', ')})")

        progress = None
        if not output.is_quiet_mode(ctx):
            progress = Progress(f"Importing {source.name}", len(records))

        for number, fields in enumerate(records, start=1):
            if len(fields) > len(header):
                raise ValueError(
                    f"{source}:{number + 1}: {len(fields)} fields, header has {len(header)}"
                )
            fields = fields + [""] * (len(header) - len(fields))
            conn.insert(table, [Column(name, Text(v)) for name, v in zip(header, fields)])
            if progress:
                progress.update(number)

        if progress:
            progress.finish()

    output.echo_text(f"Imported {len(records)} rows into {table}", ctx)


@app.command("init-config")
def init_config():
    """Write the default config.yaml if it does not exist."""
    if config.init_config():
        typer.echo(f"Wrote {config.config_path()}")
    else:
        typer.echo(f"Config already exists at {config.config_path()}")


def main() -> None:
    """Entry point for typedstore command."""
    install_error_handler()
    app()
