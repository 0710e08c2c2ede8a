"""Whole-file JSON persistence for the task list."""

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from tasker.models import Task, TaskStatus

logger = logging.getLogger(__name__)


class _MalformedState(Exception):
    pass


def from_row(row: dict[str, Any]) -> Task:
    """Convert a persisted dict to a Task.

    Keys beyond the Task fields are ignored. Missing fields, a negative or
    non-integer id, a description that is not a UTF-8 encodable string or an
    unknown status name raise _MalformedState.
    """
    if not isinstance(row, dict):
        raise _MalformedState(f"expected object, got {type(row).__name__}")

    missing = [f.name for f in fields(Task) if f.name not in row]
    if missing:
        raise _MalformedState(f"missing {', '.join(missing)}")

    task_id = row["id"]
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
        raise _MalformedState(f"invalid id {task_id!r}")

    description = row["description"]
    if not isinstance(description, str):
        raise _MalformedState(f"invalid description {description!r}")
    try:
        description.encode("utf-8")
    except UnicodeEncodeError as e:
        raise _MalformedState("description is not valid UTF-8") from e

    try:
        status = TaskStatus(row["status"])
    except ValueError as e:
        raise _MalformedState(f"invalid status {row['status']!r}") from e

    return Task(id=task_id, description=description, status=status)


def to_row(task: Task) -> dict[str, Any]:
    row = asdict(task)
    row["status"] = task.status.value
    return row


def load(path: Path) -> list[Task]:
    """Read the whole task file.

    Absent file -> empty list. Unparseable content or wrong shape -> empty list;
    the unreadable contents are overwritten on the next save.
    """
    if not path.exists():
        logger.debug(f"No task file at {path}, starting empty")
        return []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise _MalformedState(f"expected list, got {type(data).__name__}")
        tasks = [from_row(row) for row in data]
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError, _MalformedState) as e:
        logger.debug(f"Discarding malformed task file {path}: {e}")
        return []

    logger.debug(f"Loaded {len(tasks)} tasks from {path}")
    return tasks


def save(tasks: list[Task], path: Path) -> None:
    """Replace the task file with the full list.

    The text is encoded before anything is written and swapped in with
    os.replace, so a failed save leaves the previous file intact.
    """
    content = json.dumps([to_row(task) for task in tasks], indent=2, ensure_ascii=False)
    data = content.encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="wb", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
    ) as temp_file:
        temp_path = temp_file.name
    try:
        Path(temp_path).write_bytes(data)
        os.replace(temp_path, path)
    except OSError:
        os.unlink(temp_path)
        raise
    logger.debug(f"Saved {len(tasks)} tasks to {path}")


@contextmanager
def ensure(path: Path) -> Iterator[list[Task]]:
    """Load the task list, yield it for one mutation, save it back.

    Nothing is written if the body raises.
    """
    tasks = load(path)
    yield tasks
    save(tasks, path)
