"""CLI error handling: wrap commands to report fatal errors instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import Exit

from tasker.errors import TaskerError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Domain errors print their own message; other common errors are prefixed
    with their kind. All of them echo to stderr and exit with status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except TaskerError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
