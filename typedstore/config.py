from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from typedstore.lib import paths

DEFAULTS: dict[str, Any] = {
    "log_level": "WARNING",
    "slow_open_seconds": 0.1,
    "pragmas": {
        "foreign_keys": "ON",
        "busy_timeout": 5000,
    },
}


def config_path() -> Path:
    return paths.config_file()


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml merged over defaults. Missing file means defaults."""
    cfg = {**DEFAULTS, "pragmas": dict(DEFAULTS["pragmas"])}
    path = paths.config_file()
    if not path.exists():
        return cfg
    with open(path) as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping")
    user_pragmas = loaded.pop("pragmas", {})
    cfg.update(loaded)
    if user_pragmas is None:
        # explicit empty "pragmas:" disables the defaults
        cfg["pragmas"] = {}
    elif not isinstance(user_pragmas, dict):
        raise ValueError(f"pragmas in {path} must be a mapping")
    else:
        cfg["pragmas"].update(user_pragmas)
    return cfg


def pragmas() -> dict[str, Any]:
    return dict(load_config()["pragmas"])


def log_level() -> str:
    return str(load_config()["log_level"]).upper()


def slow_open_seconds() -> float:
    return float(load_config()["slow_open_seconds"])


def init_config() -> bool:
    """Write the default config.yaml if missing. Returns True if written."""
    target = paths.config_file()
    if target.exists():
        return False

    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w") as f:
        yaml.safe_dump(DEFAULTS, f, sort_keys=False)
    return True
