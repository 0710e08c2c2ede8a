"""Task formatting for CLI display."""

from tasker.models import Task


def format_task(task: Task) -> str:
    return f"[{task.id}] {task.description} - {task.status.value}"


def format_task_list(tasks: list[Task]) -> str:
    """Format list of tasks for display.

    Returns one line per task, or "No tasks found" for an empty list.
    """
    if not tasks:
        return "No tasks found"

    return "\n".join(format_task(task) for task in tasks)
