"""
In-memory appender

Keeps every delivered message; handy for tests and for inspecting what a
logger emitted.
"""

import threading
from typing import Any, List, NamedTuple, Tuple

from simply_log.appenders.base_appender import BaseAppender


class LogRecord(NamedTuple):
    """One delivered message."""

    logger_name: str
    level_name: str
    args: Tuple[Any, ...]


class MemoryAppender(BaseAppender):
    """Collect delivered messages in a list."""

    def __init__(self):
        self._records: List[LogRecord] = []
        self._lock = threading.Lock()

    def append(self, logger_name: str, level_name: str, args: Tuple[Any, ...]) -> None:
        with self._lock:
            self._records.append(LogRecord(logger_name, level_name, tuple(args)))

    @property
    def records(self) -> List[LogRecord]:
        """Copy of the recorded messages, oldest first."""
        with self._lock:
            return list(self._records)

    def messages(self) -> List[str]:
        """Recorded arguments joined the way the console appender joins them."""
        return [" ".join(str(arg) for arg in record.args) for record in self.records]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
