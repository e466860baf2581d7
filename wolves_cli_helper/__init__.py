#!filepath: wolves_cli_helper/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .observability import NOT_FOUND, Timer, TimerRegistry
from .sysinfo.system_info import DiskInfo, SystemInfo
from .verbose.console import announce, padding_line, report_timers, say, write_header_lines

__all__ = [
    "__version__",
    "logs", "Logging",
    "AppConfig",
    "Timer", "TimerRegistry", "NOT_FOUND",
    "SystemInfo", "DiskInfo",
    "say", "announce", "write_header_lines", "padding_line", "report_timers",
]
