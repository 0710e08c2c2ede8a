"""Task primitive: ordered task list with add, update, delete, status and list."""

from .cli import app, main
from .operations import add_task, delete_task, list_tasks, set_status, update_task

__all__ = [
    "add_task",
    "app",
    "delete_task",
    "list_tasks",
    "main",
    "set_status",
    "update_task",
]
