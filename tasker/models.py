import re
from dataclasses import dataclass
from enum import Enum

from tasker.errors import InvalidStatusError


class TaskStatus(str, Enum):
    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


STATUS_ARGS = {
    "todo": TaskStatus.TODO,
    "in-progress": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.DONE,
}

_ID_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class Task:
    id: int
    description: str
    status: TaskStatus = TaskStatus.TODO


def parse_status(value: str) -> TaskStatus:
    """Map a CLI status argument to TaskStatus. Exact, case-sensitive match."""
    try:
        return STATUS_ARGS[value]
    except KeyError:
        raise InvalidStatusError(value) from None


def parse_id(value: str) -> int:
    """Parse a task id argument; anything that is not a plain number becomes 0."""
    if not _ID_PATTERN.fullmatch(value):
        return 0
    return int(value)
