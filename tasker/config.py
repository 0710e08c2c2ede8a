from functools import lru_cache
from pathlib import Path

import yaml

from tasker.errors import ConfigError
from tasker.lib import paths

DEFAULT_FILE = "tasks.json"
ID_STRATEGIES = ("length", "max")


def config_file() -> Path:
    """Return config file path in the working directory."""
    return paths.config_file()


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config must be a mapping, got {type(cfg).__name__}")

    if "file" in cfg and (not isinstance(cfg["file"], str) or not cfg["file"]):
        raise ConfigError("Config 'file' must be a non-empty string")

    if "ids" in cfg and cfg["ids"] not in ID_STRATEGIES:
        raise ConfigError(f"Config 'ids' must be one of: {', '.join(ID_STRATEGIES)}")

    if "debug" in cfg and not isinstance(cfg["debug"], bool):
        raise ConfigError("Config 'debug' must be true or false")


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load tasker.yaml, returning its content or an empty dict if not found."""
    path = config_file()
    if not path.exists():
        return {}
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}
    _validate_config(cfg)
    return cfg


def store_file() -> Path:
    """Return the backing task file path."""
    return paths.resolve(load_config().get("file", DEFAULT_FILE))


def id_strategy() -> str:
    return load_config().get("ids", "length")


def debug_enabled() -> bool:
    return load_config().get("debug", False)
