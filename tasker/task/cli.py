"""Task CLI: one load, one command, one save per invocation."""

import logging
from typing import Annotated

import click
import typer
from typer.core import TyperGroup

from tasker import config
from tasker.cli import output
from tasker.cli.errors import error_feedback
from tasker.errors import TaskNotFoundError
from tasker.lib import store
from tasker.models import parse_id, parse_status
from tasker.task import operations
from tasker.task.format import format_task_list

UNKNOWN_COMMAND = "unknown"

# Surplus arguments are ignored and "-words" are description text.
LENIENT = {"allow_extra_args": True, "ignore_unknown_options": True}


class TaskerGroup(TyperGroup):
    """Command group that sends unrecognized command names to the hidden fallback."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # The group has no options besides help; "-x" in command position is an unknown command.
        if args and args[0].startswith("-") and args[0] not in ctx.help_option_names:
            args = [UNKNOWN_COMMAND, *args[1:]]
        return super().parse_args(ctx, args)

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and self.get_command(ctx, args[0]) is None:
            return UNKNOWN_COMMAND, self.get_command(ctx, UNKNOWN_COMMAND), args[1:]
        return super().resolve_command(ctx, args)


main_app = typer.Typer(
    cls=TaskerGroup,
    invoke_without_command=True,
    add_completion=False,
    help="""Single-user task tracker. Tasks live in tasks.json in the working directory.""",
)


@main_app.callback(context_settings={"help_option_names": ["-h", "--help"]})
@error_feedback
def main_callback(ctx: typer.Context):
    if config.debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="[tasker] %(message)s")

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        with store.ensure(config.store_file()):
            output.usage()


@main_app.command("add", context_settings=LENIENT)
@error_feedback
def add(
    words: Annotated[list[str] | None, typer.Argument(help="Task description")] = None,
):
    """Create new task."""
    with store.ensure(config.store_file()) as tasks:
        if not words:
            output.usage("add <desc>")
            return
        task = operations.add_task(tasks, " ".join(words), config.id_strategy())
        output.out_text(f"Task added with ID: {task.id}")


@main_app.command("update", context_settings=LENIENT)
@error_feedback
def update(
    task_id: Annotated[str | None, typer.Argument(help="Task ID")] = None,
    words: Annotated[list[str] | None, typer.Argument(help="New description")] = None,
):
    """Replace a task's description."""
    with store.ensure(config.store_file()) as tasks:
        if task_id is None or not words:
            output.usage("update <id> <desc>")
            return
        tid = parse_id(task_id)
        try:
            operations.update_task(tasks, tid, " ".join(words))
        except TaskNotFoundError as e:
            output.err_text(str(e))
            return
        output.out_text(f"Task {tid} updated")


@main_app.command("delete", context_settings=LENIENT)
@error_feedback
def delete(
    task_id: Annotated[str | None, typer.Argument(help="Task ID")] = None,
):
    """Remove a task."""
    with store.ensure(config.store_file()) as tasks:
        if task_id is None:
            output.usage("delete <id>")
            return
        tid = parse_id(task_id)
        try:
            operations.delete_task(tasks, tid)
        except TaskNotFoundError as e:
            output.err_text(str(e))
            return
        output.out_text(f"Task {tid} deleted")


@main_app.command("status", context_settings=LENIENT)
@error_feedback
def status(
    task_id: Annotated[str | None, typer.Argument(help="Task ID")] = None,
    new_status: Annotated[
        str | None, typer.Argument(help="todo, in-progress or done")
    ] = None,
):
    """Set a task's status."""
    with store.ensure(config.store_file()) as tasks:
        if task_id is None or new_status is None:
            output.usage("status <id> <status>")
            return
        tid = parse_id(task_id)
        # InvalidStatusError is fatal: it propagates out of ensure() before the save.
        parsed = parse_status(new_status)
        try:
            operations.set_status(tasks, tid, parsed)
        except TaskNotFoundError as e:
            output.err_text(str(e))
            return
        output.out_text(f"Task {tid} status updated")


@main_app.command("list", context_settings=LENIENT)
@error_feedback
def list_cmd(
    filter_name: Annotated[
        str, typer.Argument(help="all, done, not-done or in-progress")
    ] = "all",
):
    """List tasks."""
    with store.ensure(config.store_file()) as tasks:
        output.out_text(format_task_list(operations.list_tasks(tasks, filter_name)))


@main_app.command(UNKNOWN_COMMAND, hidden=True, context_settings=LENIENT)
@error_feedback
def unknown():
    with store.ensure(config.store_file()):
        output.err_text("Unknown command")


def main() -> None:
    """Entry point for tasker command."""
    try:
        main_app()
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


app = main_app

__all__ = ["app", "main"]
