"""
Command-line entry point.

Usage:
  easinote-splash default        restore images/DefaultSplashScreen.png
  easinote-splash edit           apply images/EditedSplashBanner.png
  easinote-splash edit PATH      apply the image at PATH
  easinote-splash admin          grant Users full control on the banner (asks for elevation)
"""

from __future__ import annotations

import sys
from typing import Sequence

from . import __version__
from .core.banner_service import BannerUpdater
from .core.config_manager import ConfigManager
from .utils.logger import setup_logging, strip_log_flags
from .utils.paths import log_dir

USAGE = """\
usage: easinote-splash COMMAND [PATH] [--no-log] [--sentrylog]

commands:
  default        restore the default splash banner (images/DefaultSplashScreen.png)
  edit           apply the edited splash banner (images/EditedSplashBanner.png)
  edit PATH      apply the splash banner at PATH
  admin          grant Users full control on the banner file, requesting
                 administrator rights first if needed

options:
  --no-log       do not log to the console
  --sentrylog    print error-reporting debug output

Unknown commands and any other number of arguments are ignored without
a message; the program then exits with status 0.
"""


def dispatch(updater: BannerUpdater, args: Sequence[str]) -> bool:
    """Run the command named by args. Returns False when nothing matched."""
    if len(args) == 1:
        command = args[0]
        if command == "default":
            updater.change_default_banner_image()
            return True
        if command == "edit":
            updater.change_banner_image()
            return True
        if command == "admin":
            updater.set_security()
            return True
    elif len(args) == 2:
        if args[0] == "edit":
            updater.change_banner_image(args[1])
            return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    raw_args = list(sys.argv[1:] if argv is None else argv)
    args = strip_log_flags(raw_args)

    if len(args) == 1 and args[0] in ("-h", "--help"):
        print(USAGE)
        return 0
    if len(args) == 1 and args[0] == "--version":
        print(__version__)
        return 0

    config = ConfigManager()
    logger = setup_logging(raw_args, log_dir(config.get("log_dir")), config.sentry_dsn)

    prog = sys.argv[0] if sys.argv else "easinote-splash"
    updater = BannerUpdater([prog, *raw_args], config, logger)
    if not dispatch(updater, args):
        logger.debug(f"No command matched {args!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
