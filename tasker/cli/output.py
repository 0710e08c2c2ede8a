import typer

USAGE = (
    "add <desc> | update <id> <desc> | delete <id> | status <id> <status> "
    "| list [all|done|not-done|in-progress]"
)


def out_text(msg: str) -> None:
    typer.echo(msg)


def err_text(msg: str) -> None:
    typer.echo(msg, err=True)


def usage(form: str = USAGE) -> None:
    """Report wrong argument count for a command on stderr."""
    err_text(f"Usage: {form}")
