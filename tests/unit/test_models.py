import pytest

from tasker.errors import InvalidStatusError
from tasker.models import Task, TaskStatus, parse_id, parse_status


def test_new_task_starts_todo():
    assert Task(id=1, description="buy milk").status == TaskStatus.TODO


def test_status_values_are_persisted_names():
    assert [s.value for s in TaskStatus] == ["Todo", "InProgress", "Done"]


@pytest.mark.parametrize(
    ("arg", "expected"),
    [
        ("todo", TaskStatus.TODO),
        ("in-progress", TaskStatus.IN_PROGRESS),
        ("done", TaskStatus.DONE),
    ],
)
def test_parse_status_accepts_cli_names(arg, expected):
    assert parse_status(arg) is expected


@pytest.mark.parametrize("arg", ["Done", "DONE", "in_progress", "finished", ""])
def test_parse_status_rejects_anything_else(arg):
    """Boundary: match is exact and case-sensitive."""
    with pytest.raises(InvalidStatusError, match="Use: todo, in-progress, done") as exc:
        parse_status(arg)
    assert exc.value.value == arg


def test_invalid_status_is_value_error():
    with pytest.raises(ValueError):
        parse_status("nope")


def test_parse_id_numbers():
    assert parse_id("7") == 7
    assert parse_id("007") == 7
    assert parse_id("+3") == 3


@pytest.mark.parametrize("arg", ["abc", "-1", "1.5", " 2", "2 ", "", "1_000", "٣"])
def test_parse_id_falls_back_to_zero(arg):
    assert parse_id(arg) == 0
