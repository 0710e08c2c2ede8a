class TaskerError(Exception):
    """Base exception for tasker domain errors."""

    pass


class TaskNotFoundError(TaskerError, LookupError):
    """Raised when no task carries the requested id."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class InvalidStatusError(TaskerError, ValueError):
    """Raised when a status argument is not todo, in-progress or done."""

    def __init__(self, value: str):
        super().__init__("Invalid status. Use: todo, in-progress, done")
        self.value = value


class ConfigError(TaskerError):
    """Raised when tasker.yaml has an invalid structure."""

    pass
