"""EasiNote 启动图替换工具"""

__version__ = "1.0.0"
