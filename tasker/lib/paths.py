import os
from pathlib import Path


def workdir() -> Path:
    """Directory holding tasker.yaml and the task file. TASKER_ROOT overrides cwd."""
    override = os.environ.get("TASKER_ROOT")
    if override:
        return Path(override).expanduser()
    return Path.cwd()


def config_file() -> Path:
    return workdir() / "tasker.yaml"


def resolve(name: str) -> Path:
    path = Path(name).expanduser()
    if path.is_absolute():
        return path
    return workdir() / path
