from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import sentry_sdk
from loguru import logger
from sentry_sdk.integrations.loguru import LoggingLevels, LoguruIntegration

NO_LOG_FLAG = "--no-log"
SENTRY_DEBUG_FLAG = "--sentrylog"
LOG_FLAGS = frozenset({NO_LOG_FLAG, SENTRY_DEBUG_FLAG})

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def strip_log_flags(argv: Sequence[str]) -> list[str]:
    """Return argv without the logging switches."""
    return [arg for arg in argv if arg not in LOG_FLAGS]


def _init_sentry(dsn: str, debug: bool) -> None:
    sentry_sdk.init(
        dsn=dsn,
        integrations=[
            LoguruIntegration(
                # DEBUG 及以上记为 breadcrumb，ERROR 及以上作为事件上报
                level=LoggingLevels.DEBUG.value,
                event_level=LoggingLevels.ERROR.value,
            )
        ],
        attach_stacktrace=True,
        send_default_pii=True,
        traces_sample_rate=1.0,
        debug=debug,
    )


def setup_logging(
    argv: Sequence[str],
    log_dir: str | Path,
    sentry_dsn: str = "",
    install_excepthook: bool = True,
):
    """
    配置日志输出并返回 logger 句柄

    Sinks:
      - log/<YYYYMMDD>.log，记录所有级别
      - 控制台（stderr），INFO 及以上；参数中含 --no-log 时关闭
      - Sentry（仅在配置了 DSN 时启用）

    Args:
        argv: 原始命令行参数（用于检查 --no-log / --sentrylog）
        log_dir: 日志目录
        sentry_dsn: Sentry DSN，为空则不上报
        install_excepthook: 是否安装全局异常钩子

    Returns:
        已配置好的 loguru logger
    """
    args = list(argv)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()

    logger.add(
        log_dir / "{time:YYYYMMDD}.log",
        level="TRACE",
        encoding="utf-8",
        backtrace=True,
        diagnose=True,
    )

    console = NO_LOG_FLAG not in args
    if console:
        _console_sink = getattr(sys, "__stderr__", None) or sys.stderr
        if _console_sink is not None:
            logger.add(_console_sink, level="INFO", format=CONSOLE_FORMAT)

    if sentry_dsn:
        _init_sentry(sentry_dsn, debug=SENTRY_DEBUG_FLAG in args)

    if install_excepthook:
        sys.excepthook = _make_excepthook(echo=not console)

    return logger


def _make_excepthook(echo: bool):
    # 全局异常捕获：崩溃原因写入日志（并经由 Sentry 上报）
    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("Uncaught exception")
        if echo:
            # Console sink is off; still let the user see the traceback.
            sys.__excepthook__(exc_type, exc_value, exc_traceback)

    return handle_exception
