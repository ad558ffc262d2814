"""
只读属性工具

On Windows ``os.chmod`` only looks at the write bit and toggles
FILE_ATTRIBUTE_READONLY; elsewhere the write permission bits are dropped or
the owner's is restored. Both calls are idempotent.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def set_readonly(path: str | Path) -> None:
    mode = stat.S_IMODE(os.stat(path).st_mode)
    os.chmod(path, mode & ~_WRITE_BITS)


def clear_readonly(path: str | Path) -> None:
    mode = stat.S_IMODE(os.stat(path).st_mode)
    os.chmod(path, mode | stat.S_IWUSR)


def is_readonly(path: str | Path) -> bool:
    return not (os.stat(path).st_mode & stat.S_IWUSR)
