import os
from pathlib import Path


def home() -> Path:
    override = os.environ.get("TYPEDSTORE_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".typedstore"


def config_file() -> Path:
    return home() / "config.yaml"
