"""Appenders module - Log output handlers"""

from simply_log.appenders.base_appender import BaseAppender
from simply_log.appenders.console_appender import ConsoleAppender
from simply_log.appenders.memory_appender import LogRecord, MemoryAppender

__all__ = ["BaseAppender", "ConsoleAppender", "LogRecord", "MemoryAppender"]
