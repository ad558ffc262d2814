"""
EasiNote 安装目录定位

Reads the path of the installed executable from
HKLM\\SOFTWARE\\WOW6432Node\\Seewo\\EasiNote5 (value ``ActualExePath``) and
derives the splash banner location from its directory.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

from .config_manager import ConfigManager


class ResolutionError(LookupError):
    """The installation could not be located."""


def read_registry_value(key_path: str, value_name: str) -> str:
    """Read a string value from HKLM under the 32-bit registry view."""
    if sys.platform != "win32":
        raise ResolutionError(f"Registry is not available on {sys.platform}: {key_path} is missing.")

    import winreg

    try:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE,
            key_path,
            0,
            winreg.KEY_READ | winreg.KEY_WOW64_32KEY,
        ) as key:
            value, _ = winreg.QueryValueEx(key, value_name)
    except FileNotFoundError as e:
        raise ResolutionError(f"{key_path}\\{value_name} is missing.") from e

    if not value:
        raise ResolutionError(f"{key_path}\\{value_name} is empty.")
    return str(value)


class InstallLocator:
    def __init__(
        self,
        config: ConfigManager,
        registry_reader: Callable[[str, str], str] | None = None,
    ) -> None:
        self.config = config
        self._read = registry_reader or read_registry_value
        self._install_dir: Path | None = None

    def get_install_dir(self) -> Path:
        if self._install_dir is None:
            override = self.config.get("install_dir")
            if override:
                self._install_dir = Path(override)
            else:
                exe_path = self._read(
                    self.config.get("registry_key"),
                    self.config.get("registry_value"),
                )
                self._install_dir = Path(exe_path).parent
        return self._install_dir

    def get_banner_path(self) -> Path:
        return self.get_install_dir().joinpath(*self.config.get("banner_relative_path"))
