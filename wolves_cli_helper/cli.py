#!filepath: wolves_cli_helper/cli.py
import subprocess
from typing import List, Optional

import typer
from rich import print

from wolves_cli_helper import __version__, logs
from wolves_cli_helper.config.app_config import AppConfig
from wolves_cli_helper.observability.registry import TimerRegistry
from wolves_cli_helper.observability.timeline_reporter import TimelineReporter
from wolves_cli_helper.utils.errors import UserInputError
from wolves_cli_helper.verbose.console import announce, report_timers, say as say_line

app = typer.Typer(help="Wolves CLI helper: system info, timers, styled output")


def _load_config(path: Optional[str]) -> AppConfig:
    try:
        return AppConfig.load(path).apply()
    except (FileNotFoundError, UserInputError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)


@app.command()
def version():
    print(__version__)


@app.command()
def info(config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML 配置文件")):
    """
    打印主机信息（系统 / CPU / 内存 / 磁盘）
    """
    cfg = _load_config(config)
    announce(style=cfg.verbose, config_file=cfg.config_file)


@app.command()
def say(
    message: str,
    config: Optional[str] = typer.Option(None, "--config", "-c"),
):
    """
    带时间戳输出一行
    """
    cfg = _load_config(config)
    say_line(message, style=cfg.verbose)


@app.command(
    "time",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def time_command(
    command: List[str] = typer.Argument(..., help="要计时的命令，例如: -- sleep 1"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=0, help="处理数量，用于计算速率"),
    config: Optional[str] = typer.Option(None, "--config", "-c"),
):
    """
    运行一个命令并输出耗时（和速率）
    """
    cfg = _load_config(config)

    name = command[0]
    timers = TimerRegistry(name)
    try:
        proc = subprocess.run(command, check=False)
    except FileNotFoundError:
        print(f"[red]command not found: {name}[/red]")
        raise typer.Exit(code=127)
    except PermissionError:
        print(f"[red]permission denied: {name}[/red]")
        raise typer.Exit(code=126)
    except OSError as e:
        print(f"[red]cannot execute {name}: {e}[/red]")
        raise typer.Exit(code=126)
    timers.end(name)

    quantities = {name: count} if count is not None else None
    TimelineReporter(timers, " ".join(command), quantities).print()
    report_timers(timers, quantities, style=cfg.verbose)

    if proc.returncode != 0:
        logs.warning(f"[Time] {name} exited with {proc.returncode}")
    raise typer.Exit(code=proc.returncode)


if __name__ == "__main__":
    app()

# python -m wolves_cli_helper.cli time -- sleep 1
