#!filepath: wolves_cli_helper/observability/timeline_reporter.py
from typing import Mapping, Optional

from wolves_cli_helper import logs
from wolves_cli_helper.observability.registry import TimerRegistry


class TimelineReporter:
    """
    计时器 Timeline 报告（写日志，不写终端）：
    - timer → 耗时毫秒 [→ 速率]
    """

    def __init__(
        self,
        registry: TimerRegistry,
        title: str,
        quantities: Optional[Mapping[str, int]] = None,
    ):
        self.registry = registry
        self.title = title
        self.quantities = quantities

    def print(self):
        logs.info(f"[Timeline] ===== Timers for {self.title} =====")

        for name, row in self.registry.summary(self.quantities).items():
            line = f"[Timeline] {name:<30} {row['duration_ms']:>8d}ms"
            if "rate" in row:
                line += f" {row['rate']:>10d}/s"
            logs.info(line)

        logs.info("[Timeline] ===========================================")
