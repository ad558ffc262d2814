from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from easinote_splash.core.config_manager import ConfigManager
from easinote_splash.utils.admin_utils import Elevator

EDITED_BYTES = b"\x89PNG\r\n\x1a\nedited-banner"
DEFAULT_BYTES = b"\x89PNG\r\n\x1a\ndefault-banner"
ORIGINAL_BYTES = b"\x89PNG\r\n\x1a\noriginal-banner"


class FakeElevator(Elevator):
    def __init__(self, admin: bool) -> None:
        self.admin = admin
        self.relaunched: list[list[str]] = []
        self.granted: list[Path] = []

    def is_admin(self) -> bool:
        return self.admin

    def relaunch_elevated(self, argv) -> None:
        self.relaunched.append(list(argv))

    def grant_full_control(self, path) -> None:
        self.granted.append(Path(path))


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    yield
    logger.remove()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Working directory with source images and a fake EasiNote install."""
    monkeypatch.chdir(tmp_path)

    install_dir = tmp_path / "EasiNote5" / "swenlauncher"
    (install_dir / "Assets").mkdir(parents=True)
    banner = install_dir / "Assets" / "SplashScreen.png"
    banner.write_bytes(ORIGINAL_BYTES)

    images = tmp_path / "images"
    images.mkdir()
    (images / "EditedSplashBanner.png").write_bytes(EDITED_BYTES)
    (images / "DefaultSplashScreen.png").write_bytes(DEFAULT_BYTES)

    (tmp_path / "config.json").write_text(
        json.dumps({"install_dir": str(install_dir)}), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def banner(workspace) -> Path:
    return workspace / "EasiNote5" / "swenlauncher" / "Assets" / "SplashScreen.png"


@pytest.fixture
def config(workspace) -> ConfigManager:
    return ConfigManager()
