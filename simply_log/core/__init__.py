"""
Core module for simply_log

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- Logger: Named leveled logger
- Registry: One logger per name, plus creation defaults
- RegistryBuilder: Builder pattern for registry construction
- RegistryConfig: Configuration management
- ColorPalette: Level colors for console output
"""

from simply_log.core.log_level import InvalidLevelError, LogLevel, rank_of
from simply_log.core.palette import ColorPalette
from simply_log.core.logger import Logger
from simply_log.core.registry_config import RegistryConfig
from simply_log.core.registry import Registry
from simply_log.core.registry_builder import RegistryBuilder

__all__ = [
    "ColorPalette",
    "InvalidLevelError",
    "LogLevel",
    "Logger",
    "Registry",
    "RegistryBuilder",
    "RegistryConfig",
    "rank_of",
]
