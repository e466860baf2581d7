# wolves_cli_helper/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (yaml content, cli arguments).
    Should NOT print traceback.
    """


class TimerError(Exception):
    """Base class for named-timer errors."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class TimerNotFoundError(TimerError, KeyError):
    """
    require(name) 找不到计时器时抛出。
    sentinel API（end / duration / rate）不抛这个，返回 -1。
    """

    def __str__(self) -> str:
        return f"timer not found: {self.name!r}"


class TimerExistsError(TimerError):
    """add(name, exist_ok=False) 时名字已存在。"""

    def __str__(self) -> str:
        return f"timer already exists: {self.name!r}"
