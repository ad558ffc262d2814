"""
启动图替换流程

Every apply operation is the same straight-line sequence on the banner
target: clear read-only, copy the source image over it, set read-only again,
log the source that was used.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Sequence

from ..utils.admin_utils import ELEVATION_EXIT_CODE, Elevator, get_elevator
from ..utils.file_attributes import clear_readonly, set_readonly
from ..utils.paths import image_path
from .config_manager import ConfigManager
from .install_locator import InstallLocator


class BannerUpdater:
    def __init__(
        self,
        argv: Sequence[str],
        config: ConfigManager,
        logger,
        locator: InstallLocator | None = None,
        elevator: Elevator | None = None,
    ) -> None:
        # argv is the raw sys.argv; an elevated relaunch passes it on untouched
        self.argv = list(argv)
        self.config = config
        self.logger = logger
        self.locator = locator or InstallLocator(config)
        self.elevator = elevator or get_elevator()

    def get_banner_path(self) -> Path:
        return self.locator.get_banner_path()

    def edited_image_path(self) -> Path:
        return image_path(self.config.get("edited_image"), self.config.get("images_dir"))

    def default_image_path(self) -> Path:
        return image_path(self.config.get("default_image"), self.config.get("images_dir"))

    def set_readonly(self) -> None:
        set_readonly(self.get_banner_path())

    def remove_readonly(self) -> None:
        clear_readonly(self.get_banner_path())

    def set_security(self) -> None:
        """Grant Users full control on the banner, relaunching elevated first if needed."""
        if not self.elevator.is_admin():
            self.logger.warning("No administrator permission! Request permission and retry.")
            self.elevator.relaunch_elevated(self.argv)
            sys.exit(ELEVATION_EXIT_CODE)

        banner = self.get_banner_path()
        self.elevator.grant_full_control(banner)
        self.logger.info("Get permission successfully!")
        self.logger.debug(f"Granted full control on {banner}")

    def change_banner_image(self, image: str | Path | None = None) -> None:
        """
        替换启动图

        Args:
            image: 新图片路径；为 None 时使用 images/EditedSplashBanner.png
        """
        source = Path(image) if image is not None else self.edited_image_path()
        self._replace_with(source)

    def change_default_banner_image(self) -> None:
        self._replace_with(self.default_image_path())

    def _replace_with(self, source: Path) -> None:
        banner = self.get_banner_path()
        self.logger.debug(f"Banner target: {banner}")

        self.remove_readonly()
        try:
            shutil.copyfile(source, banner)
        finally:
            # The banner stays read-only even when the copy fails.
            self.set_readonly()

        self.logger.info(f"Changed seewo banner image to {source}")
