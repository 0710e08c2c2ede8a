import json

import pytest

from tasker import config


@pytest.fixture
def workspace(monkeypatch, tmp_path):
    """Isolated working directory per test execution.

    Provides:
    - tmp_path as cwd, so tasks.json and tasker.yaml land there
    - TASKER_ROOT unset
    - Fresh config cache (setup + teardown reset)
    """
    config.clear_cache()
    monkeypatch.delenv("TASKER_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)

    yield tmp_path

    config.clear_cache()


@pytest.fixture
def read_tasks(workspace):
    """Return the parsed tasks.json contents of the workspace."""

    def _read(name: str = "tasks.json"):
        return json.loads((workspace / name).read_text())

    return _read
