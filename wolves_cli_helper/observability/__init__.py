from .timer import Timer
from .registry import NOT_FOUND, TimerRegistry

__all__ = [
    "Timer",
    "TimerRegistry",
    "NOT_FOUND",
]
