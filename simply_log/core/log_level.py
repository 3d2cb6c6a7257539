"""
Log level enumeration

Ranks grow with verbosity: raising a threshold exposes more levels.
"""

from enum import IntEnum
from typing import Dict, Union


class InvalidLevelError(ValueError):
    """Raised when a level name or rank is not recognized."""


class LogLevel(IntEnum):
    """
    Log level enumeration.

    A message of rank ``r`` is accepted by a threshold ``t`` iff ``0 < r <= t``.
    OFF sits below every real level so a threshold of OFF accepts nothing.
    """

    OFF = 0         # Logging disabled
    ERROR = 1       # Errors, shown unless the logger is off
    INFO = 2        # Informational messages
    WARN = 3        # Warnings
    DEBUG = 4       # Debug information
    TRACE = 5       # Most verbose, detailed tracing

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def level_name(self) -> str:
        """Lowercase name handed to appenders."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            InvalidLevelError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in cls.__members__:
            return cls[key]
        raise InvalidLevelError(f"Invalid log level: {level_str}")


LevelLike = Union[LogLevel, int, str]

# Ranks of the levels a message can be emitted at
LEVEL_RANKS: Dict[str, int] = {
    "error": LogLevel.ERROR,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "debug": LogLevel.DEBUG,
    "trace": LogLevel.TRACE,
}

# Reverse mapping
LEVEL_NAMES: Dict[int, str] = {v: k for k, v in LEVEL_RANKS.items()}


def rank_of(level_name: str) -> int:
    """
    Return the rank of an emittable level.

    Raises:
        InvalidLevelError: For anything but the five level names
    """
    try:
        return LEVEL_RANKS[level_name.lower()]
    except (KeyError, AttributeError):
        raise InvalidLevelError(f"Invalid log level: {level_name!r}") from None


def to_rank(level: LevelLike) -> int:
    """
    Normalize a LogLevel, integer rank or level name to an integer rank.

    Integers are taken as-is so thresholds above TRACE are allowed. Digit
    strings such as "3" are read as ranks.
    """
    if isinstance(level, bool):
        raise InvalidLevelError(f"Invalid log level: {level!r}")
    if isinstance(level, int):
        return int(level)
    if isinstance(level, str):
        if level.strip().isdigit():
            return int(level.strip())
        return int(LogLevel.from_string(level))
    raise InvalidLevelError(f"Invalid log level: {level!r}")
