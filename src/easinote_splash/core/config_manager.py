from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from ..utils.paths import config_path


class ConfigManager:
    """配置管理（JSON 持久化）。

    A missing or malformed config.json simply yields the defaults.
    """

    DEFAULT_CONFIG: dict[str, Any] = {
        # Empty means auto-detect through the registry
        "install_dir": "",
        # Read under the 32-bit view (HKLM\SOFTWARE\WOW6432Node\...)
        "registry_key": r"SOFTWARE\Seewo\EasiNote5",
        "registry_value": "ActualExePath",
        "banner_relative_path": ["Assets", "SplashScreen.png"],

        # Source images, relative to the working directory
        "images_dir": "images",
        "edited_image": "EditedSplashBanner.png",
        "default_image": "DefaultSplashScreen.png",

        # Logging
        "log_dir": "log",
        # Empty falls back to the SENTRY_DSN environment variable
        "sentry_dsn": "",
    }

    def __init__(self, config_file: str | Path | None = None) -> None:
        self.config_file = Path(config_file) if config_file is not None else config_path()
        self.config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()

        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return self.DEFAULT_CONFIG.copy()
        if not isinstance(data, dict):
            return self.DEFAULT_CONFIG.copy()

        # 合并默认配置，防止缺字段
        merged = {**self.DEFAULT_CONFIG, **data}

        # Normalize
        parts = merged.get("banner_relative_path")
        if isinstance(parts, str):
            parts = [p for p in parts.replace("\\", "/").split("/") if p]
        if not parts or not all(isinstance(p, str) for p in parts):
            parts = list(self.DEFAULT_CONFIG["banner_relative_path"])
        merged["banner_relative_path"] = list(parts)

        for key in ("install_dir", "sentry_dsn"):
            merged[key] = str(merged.get(key) or "").strip()

        return merged

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    @property
    def sentry_dsn(self) -> str:
        return self.get("sentry_dsn") or os.environ.get("SENTRY_DSN", "")
