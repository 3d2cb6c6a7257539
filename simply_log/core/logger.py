"""
Named leveled logger dispatching to appenders
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Tuple
import threading

from simply_log.core.log_level import LogLevel, LevelLike, LEVEL_NAMES, to_rank

Appender = Callable[[str, str, Tuple[Any, ...]], None]


class Logger:
    """
    Named logger with a mutable threshold and an ordered set of appenders.

    Loggers are normally obtained from a Registry, which guarantees one
    instance per name.
    """

    def __init__(
        self,
        name: str,
        level: LevelLike = LogLevel.INFO,
        appenders: Iterable[Appender] = (),
    ):
        self._name = name
        self._level = to_rank(level)
        # Copy-on-write: replaced, never mutated, so emit needs no lock
        self._appenders: Tuple[Appender, ...] = ()
        self._lock = threading.RLock()
        self._metrics = {"logged": 0, "filtered": 0, "appender_errors": 0}

        for appender in appenders:
            self.add_appender(appender)

    @property
    def name(self) -> str:
        """Logger name."""
        return self._name

    @property
    def level(self) -> int:
        """Current threshold rank."""
        return self._level

    @property
    def appenders(self) -> Tuple[Appender, ...]:
        """Attached appenders in attachment order."""
        return self._appenders

    def set_level(self, level: LevelLike) -> None:
        """
        Replace the threshold.

        Args:
            level: LogLevel, integer rank or level name

        Raises:
            InvalidLevelError: If level is not a rank or known level name
        """
        self._level = to_rank(level)

    def add_appender(self, appender: Appender) -> "Logger":
        """
        Attach an appender unless this exact object is already attached.

        Returns:
            Self for method chaining
        """
        if not callable(appender):
            raise TypeError("appender must be callable")

        with self._lock:
            if not any(existing is appender for existing in self._appenders):
                self._appenders = self._appenders + (appender,)
        return self

    def is_logged(self, level: LevelLike) -> bool:
        """Whether a message at this level would reach the appenders."""
        rank = to_rank(level)
        return 0 < rank <= self._level

    def emit(self, level: LevelLike, *args: Any) -> None:
        """
        Dispatch a message to every appender if the level is accepted.

        Each appender is isolated: one that raises is counted and skipped,
        the remaining appenders still run.
        """
        rank = to_rank(level)
        if not 0 < rank <= self._level:
            self._metrics["filtered"] += 1
            return

        level_name = LEVEL_NAMES.get(rank)
        if level_name is None:
            # Ranks above TRACE are thresholds only, never message levels
            self._metrics["filtered"] += 1
            return

        self._metrics["logged"] += 1
        for appender in self._appenders:
            try:
                appender(self._name, level_name, args)
            except Exception:
                self._metrics["appender_errors"] += 1

    def error(self, *args: Any) -> None:
        """Log error message."""
        self.emit(LogLevel.ERROR, *args)

    def info(self, *args: Any) -> None:
        """Log info message."""
        self.emit(LogLevel.INFO, *args)

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        self.emit(LogLevel.WARN, *args)

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        self.emit(LogLevel.DEBUG, *args)

    def trace(self, *args: Any) -> None:
        """Log trace message."""
        self.emit(LogLevel.TRACE, *args)

    def get_metrics(self) -> dict:
        """Get dispatch counters."""
        return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Logger(name={self._name!r}, level={self._level}, "
            f"appenders={len(self._appenders)})"
        )
