#!filepath: wolves_cli_helper/observability/registry.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, List, Mapping, Optional

from wolves_cli_helper.observability.timer import Timer
from wolves_cli_helper.utils.errors import TimerExistsError, TimerNotFoundError

# 名字不存在时 end / duration / rate 的返回值
NOT_FOUND = -1


class TimerRegistry:
    """
    命名计时器集合（name -> Timer）

    用法：
        timers = TimerRegistry("job")
        ...
        ms = timers.end("job")
        ops = timers.rate("job", 100)

    约定：
    1. 名字唯一，add() 同名直接覆盖旧计时器（旧的结果丢失）
    2. end / duration / rate 找不到名字时返回 NOT_FOUND（-1），不抛异常
    3. 需要显式错误时用 get() / require()
    4. 不打日志、不做 I/O、不加锁（单线程使用）
    """

    def __init__(self, name: str):
        self.timers: Dict[str, Timer] = {name: Timer()}

    # ---------------------------------------------------------
    # 创建 / 删除
    # ---------------------------------------------------------
    def add(self, name: str, *, exist_ok: bool = True) -> None:
        """
        新建一个运行中的计时器。

        exist_ok=False 时同名已存在抛 TimerExistsError，
        默认 True：覆盖。
        """
        if not exist_ok and name in self.timers:
            raise TimerExistsError(name)
        self.timers[name] = Timer()

    def remove(self, name: str) -> bool:
        return self.timers.pop(name, None) is not None

    def clear(self) -> None:
        self.timers.clear()

    # ---------------------------------------------------------
    # sentinel API
    # ---------------------------------------------------------
    def end(self, name: str) -> int:
        timer = self.timers.get(name)
        if timer is None:
            return NOT_FOUND
        timer.end()
        return timer.duration()

    def duration(self, name: str) -> int:
        timer = self.timers.get(name)
        if timer is None:
            return NOT_FOUND
        return timer.duration()

    def rate(self, name: str, quantity: int) -> int:
        """
        quantity / 秒（整数截断）。耗时为 0 时按 1ms 计算。
        """
        timer = self.timers.get(name)
        if timer is None:
            return NOT_FOUND
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")
        elapsed = timer.duration() or 1
        return quantity * 1000 // elapsed

    # ---------------------------------------------------------
    # 显式查询
    # ---------------------------------------------------------
    def get(self, name: str) -> Optional[Timer]:
        return self.timers.get(name)

    def require(self, name: str) -> Timer:
        try:
            return self.timers[name]
        except KeyError:
            raise TimerNotFoundError(name) from None

    def names(self) -> List[str]:
        return list(self.timers)

    def __contains__(self, name: object) -> bool:
        return name in self.timers

    def __len__(self) -> int:
        return len(self.timers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.timers)

    # ---------------------------------------------------------
    # Context Manager
    # ---------------------------------------------------------
    @contextmanager
    def timer(self, name: str):
        """
        with timers.timer("load"):
            ...

        进入时 add(name)（覆盖同名），退出时 end(name)，异常也会结束计时。
        """
        self.add(name)
        try:
            yield self.timers[name]
        finally:
            # with 块里可能 remove / clear
            t = self.timers.get(name)
            if t is not None:
                t.end()

    def summary(self, quantities: Optional[Mapping[str, int]] = None) -> Dict[str, Dict[str, int]]:
        """
        name -> {"duration_ms": ..., "rate": ...}
        rate 只在 quantities 里给了数量时出现。
        """
        quantities = quantities or {}
        out: Dict[str, Dict[str, int]] = {}
        for name in self.timers:
            row = {"duration_ms": self.duration(name)}
            if name in quantities:
                row["rate"] = self.rate(name, quantities[name])
            out[name] = row
        return out

    def __repr__(self) -> str:
        return f"TimerRegistry({self.names()!r})"
