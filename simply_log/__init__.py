"""
BSD 3-Clause License

Copyright (c) 2012, Matt McClellan
All rights reserved.

simply_log - A small leveled logging facade
Named loggers, level thresholds and pluggable appenders
"""

__version__ = "0.3.0"
__author__ = "Matt McClellan"

from simply_log.core.log_level import InvalidLevelError, LogLevel, rank_of
from simply_log.core.logger import Logger
from simply_log.core.registry import Registry
from simply_log.core.registry_builder import RegistryBuilder
from simply_log.core.registry_config import RegistryConfig
from simply_log.appenders import BaseAppender, ConsoleAppender, MemoryAppender

# Level constants
OFF = LogLevel.OFF
ERROR = LogLevel.ERROR
INFO = LogLevel.INFO
WARN = LogLevel.WARN
DEBUG = LogLevel.DEBUG
TRACE = LogLevel.TRACE

# Process-wide registry, created at import and never torn down
default_registry = Registry()

get_logger = default_registry.get_logger
console_logger = default_registry.console_logger
add_default_appender = default_registry.add_default_appender
set_default_level = default_registry.set_default_level
color = default_registry.color

__all__ = [
    "OFF",
    "ERROR",
    "INFO",
    "WARN",
    "DEBUG",
    "TRACE",
    "BaseAppender",
    "ConsoleAppender",
    "InvalidLevelError",
    "LogLevel",
    "Logger",
    "MemoryAppender",
    "Registry",
    "RegistryBuilder",
    "RegistryConfig",
    "add_default_appender",
    "color",
    "console_logger",
    "default_registry",
    "get_logger",
    "rank_of",
    "set_default_level",
]
