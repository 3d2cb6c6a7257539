"""
Logger registry

Keeps one Logger per name together with the defaults applied to loggers
when they are created.
"""

from __future__ import annotations
import threading
from typing import Dict, List, Optional, TextIO, Tuple, Union

from simply_log.appenders.console_appender import ConsoleAppender
from simply_log.core.log_level import LogLevel, LevelLike, to_rank
from simply_log.core.logger import Appender, Logger
from simply_log.core.palette import ColorPalette
from simply_log.core.registry_config import RegistryConfig


class Registry:
    """
    Name -> Logger store enforcing one instance per name.

    A registry is created once and lives as long as the process or test
    that owns it; loggers are never removed. Defaults (level and appenders)
    are applied when a logger is created and never retroactively.

    Thread Safety:
        Lookup-or-create and default changes share one lock, so two threads
        asking for the same name always get the same Logger.

    Example:
        registry = Registry()
        registry.add_default_appender(my_appender)
        registry.set_default_level(LogLevel.DEBUG)

        log = registry.get_logger("db")
        log.debug("connected to", host)
    """

    def __init__(
        self,
        default_level: LevelLike = LogLevel.INFO,
        use_colors: bool = False,
        stream: Optional[TextIO] = None,
        colors: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize registry.

        Args:
            default_level: Threshold given to newly created loggers
            use_colors: Whether the console appender colors its prefix
            stream: Stream for the console appender (default: sys.stdout
                    and sys.stderr by level)
            colors: Overrides for the default level colors
        """
        self._loggers: Dict[str, Logger] = {}
        self._default_appenders: List[Appender] = []
        self._default_level = to_rank(default_level)
        self._palette = ColorPalette(colors, use_colors=use_colors)
        self._console_appender = ConsoleAppender(self._palette, stream=stream)
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "Registry":
        """Create a registry from a configuration."""
        registry = cls(
            default_level=config.default_level,
            use_colors=config.use_colors,
            stream=config.stream,
            colors=config.colors,
        )
        if config.console_output:
            registry.add_default_appender(registry.console_appender)
        return registry

    def get_logger(self, name: str) -> Logger:
        """
        Return the logger for a name, creating it on first use.

        A new logger starts with the current default level and the current
        default appenders.
        """
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(
                    name,
                    level=self._default_level,
                    appenders=self._default_appenders,
                )
                self._loggers[name] = logger
            return logger

    def console_logger(self, name: str) -> Logger:
        """
        Return the logger for a name with the console appender attached.

        The console appender is shared by the whole registry, so repeated
        calls never attach it twice.
        """
        logger = self.get_logger(name)
        logger.add_appender(self._console_appender)
        return logger

    def add_default_appender(self, appender: Appender) -> "Registry":
        """
        Add an appender given to every logger created from now on.

        Returns:
            Self for method chaining
        """
        if not callable(appender):
            raise TypeError("appender must be callable")

        with self._lock:
            self._default_appenders.append(appender)
        return self

    def set_default_level(self, level: LevelLike) -> "Registry":
        """
        Set the threshold given to loggers created from now on.

        Raises:
            InvalidLevelError: If level is not a rank or known level name

        Returns:
            Self for method chaining
        """
        rank = to_rank(level)
        with self._lock:
            self._default_level = rank
        return self

    @property
    def default_level(self) -> int:
        """Threshold given to new loggers."""
        return self._default_level

    @property
    def default_appenders(self) -> Tuple[Appender, ...]:
        """Appenders given to new loggers."""
        with self._lock:
            return tuple(self._default_appenders)

    @property
    def console_appender(self) -> ConsoleAppender:
        """The registry's console appender."""
        return self._console_appender

    @property
    def use_colors(self) -> bool:
        """Whether the console appender colors its output."""
        return self._palette.use_colors

    @use_colors.setter
    def use_colors(self, enabled: bool) -> None:
        self._palette.use_colors = bool(enabled)

    def color(self, level: Union[int, str], new_color: Optional[str] = None) -> Optional[str]:
        """
        Get or set the console color of a level.

        Args:
            level: Rank or case-insensitive level name
            new_color: Color to set, e.g. "#00F" or "00F"

        Returns:
            Current color, or None for an unrecognized level
        """
        return self._palette.color(level, new_color)

    def has_logger(self, name: str) -> bool:
        """Whether a logger with this name was already created."""
        with self._lock:
            return name in self._loggers

    def logger_names(self) -> List[str]:
        """Names of all created loggers, in creation order."""
        with self._lock:
            return list(self._loggers.keys())

    def __contains__(self, name: str) -> bool:
        return self.has_logger(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Registry(loggers={len(self)}, default_level={self._default_level}, "
            f"default_appenders={len(self._default_appenders)})"
        )
