"""CLI error handling: wrap commands to report errors instead of silent failures."""

from functools import wraps

import typer
from click.exceptions import Exit

from typedstore.errors import NotFound, StoreError

NOT_FOUND_EXIT = 2


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    NotFound exits with status 2 so scripts can tell an empty match from a
    failure. Everything else exits with status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except NotFound as e:
            typer.echo(f"Not found: {e}", err=True)
            raise typer.Exit(NOT_FOUND_EXIT) from e
        except StoreError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
