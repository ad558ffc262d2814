from __future__ import annotations

import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def working_dir() -> Path:
    # Images, logs and config.json are all resolved against the caller's cwd.
    return Path.cwd()


def app_base_dir() -> Path:
    """Directory the elevated child process is started in.

    Frozen builds use the folder of the exe; otherwise the caller's working
    directory, so the child sees the same config.json and log/.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return working_dir()


def images_dir(name: str = "images") -> Path:
    return working_dir() / name


def image_path(filename: str, directory: str = "images") -> Path:
    return images_dir(directory) / filename


def config_path() -> Path:
    return working_dir() / "config.json"


def log_dir(name: str = "log") -> Path:
    return working_dir() / name
