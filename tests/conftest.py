# tests/conftest.py
from __future__ import annotations

import io

import pytest
from loguru import logger
from rich.console import Console


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


@pytest.fixture
def log_capture():
    """临时 sink 捕获 loguru 输出（DEBUG 起）"""
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    try:
        logger.remove(sink_id)
    except ValueError:
        # 测试里 logs.configure() 已经 remove 过
        pass


@pytest.fixture
def console():
    """无颜色、固定宽度的 rich Console，输出写到内存"""
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


class FakeClock:
    """替代 time 模块，只提供 perf_counter_ns"""

    def __init__(self, start_ns: int = 1_000_000_000):
        self.now = start_ns

    def perf_counter_ns(self) -> int:
        return self.now

    def advance_ms(self, ms: float):
        self.now += int(ms * 1_000_000)


@pytest.fixture
def clock(monkeypatch):
    from wolves_cli_helper.observability import timer as timer_module

    fake = FakeClock()
    monkeypatch.setattr(timer_module, "time", fake)
    return fake
