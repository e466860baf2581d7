#!filepath: wolves_cli_helper/verbose/console.py
"""
终端输出（rich）

- say(message)：带时间戳的一行
- write_header_lines(lines)：key / value 对齐着色
- padding_line()：空行 + 分隔线 + 空行，宽度跟随终端
- announce(preload)：系统信息 + 额外信息，上下各一条分隔线
- report_timers(registry)：计时器耗时 / 速率
"""
from __future__ import annotations

import shutil
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Mapping, Optional

from rich.console import Console
from rich.text import Text

from wolves_cli_helper import logs
from wolves_cli_helper.config.verbose_config import VerboseConfig
from wolves_cli_helper.observability.registry import TimerRegistry
from wolves_cli_helper.sysinfo.system_info import SystemInfo

_console: Optional[Console] = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def _color(value) -> str:
    # 256 色编号 → rich 的 "color(N)"
    if isinstance(value, int):
        return f"color({value})"
    return str(value)


def _terminal_width() -> int:
    return shutil.get_terminal_size(fallback=(0, 0)).columns


def say(message: str, console: Optional[Console] = None, style: Optional[VerboseConfig] = None) -> None:
    """
    [ Sat, 18 Oct 2026 09:15:00 +0000 ] :: message
    """
    console = console or get_console()
    style = style or VerboseConfig()

    now = format_datetime(datetime.now(timezone.utc))
    line = Text.assemble((f"[ {now} ] :: ", _color(style.key_color)), message)
    console.print(line, soft_wrap=True)


def write_header_lines(
    lines: Mapping[str, object],
    console: Optional[Console] = None,
    style: Optional[VerboseConfig] = None,
) -> None:
    console = console or get_console()
    style = style or VerboseConfig()

    width = max((len(str(k)) for k in lines), default=0)
    for key, value in lines.items():
        text = Text.assemble(
            (f"{str(key):<{width}}", _color(style.key_color)),
            " :: ",
            (str(value), _color(style.value_color)),
        )
        console.print(text, soft_wrap=True)


def padding_line(
    console: Optional[Console] = None,
    style: Optional[VerboseConfig] = None,
    width: Optional[int] = None,
) -> None:
    """
    分隔线宽度：参数 > 配置 > 终端宽度。
    终端宽度取不到（0）时什么都不输出。
    """
    console = console or get_console()
    style = style or VerboseConfig()

    width = width or style.separator_width or _terminal_width()
    if width <= 0:
        logs.debug("[Verbose] terminal width unknown, skip separator")
        return

    console.print("")
    console.print(Text("-" * width, style=_color(style.separator_color)), soft_wrap=True)
    console.print("")


def announce(
    preload: Optional[Mapping[str, object]] = None,
    console: Optional[Console] = None,
    style: Optional[VerboseConfig] = None,
    config_file: Optional[str] = None,
) -> None:
    console = console or get_console()
    info: dict = {}

    if preload:
        info.update(preload)
        for key, value in preload.items():
            console.print(f"{key}: {value}", soft_wrap=True, markup=False)

    if config_file:
        info["Using config file"] = config_file

    info.update(SystemInfo.collect().to_dict())

    padding_line(console=console, style=style)
    write_header_lines(info, console=console, style=style)
    padding_line(console=console, style=style)


def report_timers(
    registry: TimerRegistry,
    quantities: Optional[Mapping[str, int]] = None,
    console: Optional[Console] = None,
    style: Optional[VerboseConfig] = None,
) -> None:
    lines = {}
    for name, row in registry.summary(quantities).items():
        value = f"{row['duration_ms']} ms"
        if "rate" in row:
            value += f" ({row['rate']}/s)"
        lines[name] = value
    write_header_lines(lines, console=console, style=style)
