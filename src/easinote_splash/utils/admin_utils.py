"""
管理员权限工具
提供检查权限、以管理员身份重启、授予文件权限等功能
"""
from __future__ import annotations

import ctypes
import os
import stat
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from .paths import app_base_dir, is_frozen

# 请求提权后父进程的退出码
ELEVATION_EXIT_CODE = 1829

# BUILTIN\Users; the SID form works regardless of the display language
USERS_SID = "*S-1-5-32-545"


class Elevator(ABC):
    """
    权限检查与提权接口

    Windows 上真正检查并请求 UAC；其他系统假设权限足够。
    """

    @abstractmethod
    def is_admin(self) -> bool:
        """当前进程是否拥有管理员权限"""
        pass

    @abstractmethod
    def relaunch_elevated(self, argv: Sequence[str]) -> None:
        """以管理员身份重新启动当前程序"""
        pass

    @abstractmethod
    def grant_full_control(self, path: str | Path) -> None:
        """授予 Users 对文件的完全控制权限"""
        pass


class WindowsElevator(Elevator):
    def is_admin(self) -> bool:
        """
        检查当前进程是否以管理员身份运行

        Returns:
            bool: True 表示当前是管理员权限
        """
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError):
            return False

    def relaunch_elevated(self, argv: Sequence[str]) -> None:
        """
        以管理员身份启动当前程序（参数保持不变）

        Args:
            argv: 完整的 sys.argv，argv[0] 为当前程序

        Raises:
            OSError: ShellExecuteW 失败或用户取消 UAC 提示
        """
        exe_path, params = relaunch_command(argv)

        # 使用 ShellExecuteW 请求提权
        ret = ctypes.windll.shell32.ShellExecuteW(
            None,                   # hwnd
            "runas",                # lpOperation (请求管理员权限)
            exe_path,               # lpFile
            params,                 # lpParameters
            str(app_base_dir()),    # lpDirectory
            1,                      # nShowCmd (SW_SHOWNORMAL)
        )
        if ret <= 32:
            raise OSError(f"ShellExecuteW runas failed (返回码: {ret})")

    def grant_full_control(self, path: str | Path) -> None:
        subprocess.run(
            ["icacls", str(path), "/grant", f"{USERS_SID}:F"],
            check=True,
            capture_output=True,
            text=True,
            errors="ignore",
        )


class PosixElevator(Elevator):
    """No UAC here: assume enough privilege and let the grant fail on its own."""

    def is_admin(self) -> bool:
        return True

    def relaunch_elevated(self, argv: Sequence[str]) -> None:
        raise OSError(f"Elevated relaunch is not supported on {sys.platform}")

    def grant_full_control(self, path: str | Path) -> None:
        mode = stat.S_IMODE(os.stat(path).st_mode)
        os.chmod(path, mode | stat.S_IRGRP | stat.S_IWGRP | stat.S_IROTH | stat.S_IWOTH)


def relaunch_command(argv: Sequence[str]) -> tuple[str, str]:
    """Executable and parameter string that start this program again."""
    argv = list(argv)
    script = argv[0] if argv else ""
    args = argv[1:]

    if is_frozen():
        # 打包后的 exe
        exe_path = sys.executable
    elif script.lower().endswith(".py") and Path(script).is_file():
        # 开发环境：重启 Python 解释器并带上脚本
        exe_path = sys.executable
        args = [str(Path(script).resolve()), *args]
    else:
        # console_scripts wrappers strip ".exe" from argv[0], so go through the package
        exe_path = sys.executable
        args = ["-m", "easinote_splash", *args]

    return exe_path, subprocess.list2cmdline(args)


def get_elevator() -> Elevator:
    if sys.platform == "win32":
        return WindowsElevator()
    return PosixElevator()
