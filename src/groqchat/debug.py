"""Debug callback plumbing shared by components that report progress.

A debug callback is ``Callable(level, component, message)`` where level is
one of 'debug', 'info', 'warning', 'error'. The TUI routes it to its log
panel, the console commands to the terminal.
"""

from collections.abc import Callable
from enum import IntEnum

DebugCallback = Callable[[str, str, str], None]


class LogLevel(IntEnum):
    """Severity of a debug message; higher is more severe.

    Values line up with the stdlib logging numbers so thresholds read the
    same way.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, level: str) -> "LogLevel":
        """Map a callback level string to a LogLevel, DEBUG when unknown."""
        try:
            return cls[level.upper()]
        except KeyError:
            return cls.DEBUG


class DebugReporter:
    """Mixin giving a component an optional debug callback."""

    _debug_callback: DebugCallback | None = None

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for detailed logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)
