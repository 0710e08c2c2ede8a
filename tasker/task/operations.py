"""Task operations: mutate or query an in-memory task list."""

from collections.abc import Callable

from tasker.errors import TaskNotFoundError
from tasker.models import Task, TaskStatus

FILTERS: dict[str, Callable[[Task], bool]] = {
    "all": lambda task: True,
    "done": lambda task: task.status == TaskStatus.DONE,
    "not-done": lambda task: task.status != TaskStatus.DONE,
    "in-progress": lambda task: task.status == TaskStatus.IN_PROGRESS,
}


def next_id(tasks: list[Task], strategy: str = "length") -> int:
    """Id for the next task.

    "length" is count + 1 and can repeat a live id after a deletion.
    "max" is highest id + 1.
    """
    if strategy == "max":
        return max((task.id for task in tasks), default=0) + 1
    return len(tasks) + 1


def _find(tasks: list[Task], task_id: int) -> int:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    raise TaskNotFoundError(task_id)


def add_task(tasks: list[Task], description: str, strategy: str = "length") -> Task:
    task = Task(id=next_id(tasks, strategy), description=description)
    tasks.append(task)
    return task


def update_task(tasks: list[Task], task_id: int, description: str) -> Task:
    task = tasks[_find(tasks, task_id)]
    task.description = description
    return task


def delete_task(tasks: list[Task], task_id: int) -> Task:
    return tasks.pop(_find(tasks, task_id))


def set_status(tasks: list[Task], task_id: int, status: TaskStatus) -> Task:
    task = tasks[_find(tasks, task_id)]
    task.status = status
    return task


def list_tasks(tasks: list[Task], filter_name: str = "all") -> list[Task]:
    """Tasks matching the named filter, in store order. Unknown names mean all."""
    predicate = FILTERS.get(filter_name, FILTERS["all"])
    return [task for task in tasks if predicate(task)]
