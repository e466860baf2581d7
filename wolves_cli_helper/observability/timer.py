#!filepath: wolves_cli_helper/observability/timer.py
import time
from datetime import datetime

_NS_PER_MS = 1_000_000


class Timer:
    """
    单个计时区间
    - start / end: 单调时钟纳秒（time.perf_counter_ns）
    - started_at: 墙钟时间，只用于展示
    - 创建时 end == start，表示仍在运行
    - end() 可以重复调用，最后一次为准
    """

    __slots__ = ("start", "end_ns", "started_at", "_ended")

    def __init__(self):
        now = time.perf_counter_ns()
        self.start: int = now
        self.end_ns: int = now
        self.started_at: datetime = datetime.now()
        self._ended = False

    @property
    def running(self) -> bool:
        return not self._ended

    def end(self) -> None:
        self.end_ns = time.perf_counter_ns()
        self._ended = True

    def duration(self) -> int:
        """
        毫秒（截断）。未结束时返回到当前时刻为止的耗时。
        """
        if self._ended:
            elapsed = self.end_ns - self.start
        else:
            elapsed = time.perf_counter_ns() - self.start
        return max(elapsed, 0) // _NS_PER_MS

    def __repr__(self) -> str:
        state = "running" if self.running else "ended"
        return f"Timer({state}, duration_ms={self.duration()})"
