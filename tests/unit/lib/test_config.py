import pytest

from tasker import config
from tasker.errors import ConfigError


def test_defaults_without_config_file(workspace):
    assert config.load_config() == {}
    assert config.store_file() == workspace / "tasks.json"
    assert config.id_strategy() == "length"
    assert config.debug_enabled() is False


def test_config_loads_values(workspace):
    (workspace / "tasker.yaml").write_text("file: todo.json\nids: max\ndebug: true\n")

    assert config.store_file() == workspace / "todo.json"
    assert config.id_strategy() == "max"
    assert config.debug_enabled() is True


def test_empty_config_file_is_defaults(workspace):
    (workspace / "tasker.yaml").write_text("")

    assert config.load_config() == {}


def test_absolute_file_path_kept(workspace, tmp_path_factory):
    target = tmp_path_factory.mktemp("elsewhere") / "tasks.json"
    (workspace / "tasker.yaml").write_text(f"file: {target}\n")

    assert config.store_file() == target


def test_config_is_cached_until_cleared(workspace):
    assert config.id_strategy() == "length"
    (workspace / "tasker.yaml").write_text("ids: max\n")
    assert config.id_strategy() == "length"

    config.clear_cache()
    assert config.id_strategy() == "max"


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "file: 3\n",
        "file: ''\n",
        "ids: monotonic\n",
        "debug: maybe\n",
    ],
)
def test_invalid_config_raises(workspace, content):
    (workspace / "tasker.yaml").write_text(content)

    with pytest.raises(ConfigError):
        config.load_config()
