"""Registry builder pattern"""

from typing import Dict, List, Optional, TextIO

from simply_log.core.log_level import LevelLike
from simply_log.core.logger import Appender
from simply_log.core.registry import Registry
from simply_log.core.registry_config import RegistryConfig


class RegistryBuilder:
    """Builder pattern for registry construction."""

    def __init__(self):
        self._config = RegistryConfig()
        self._colors: Dict[str, str] = {}
        self._default_appenders: List[Appender] = []

    def with_default_level(self, level: LevelLike) -> "RegistryBuilder":
        """Set the threshold of newly created loggers."""
        self._config.default_level = level
        return self

    def with_console(
        self, colored: Optional[bool] = None, stream: Optional[TextIO] = None
    ) -> "RegistryBuilder":
        """Give every new logger the console appender; colors change only when given."""
        self._config.console_output = True
        if colored is not None:
            self._config.use_colors = colored
        self._config.stream = stream
        return self

    def with_colors(self, enabled: bool = True) -> "RegistryBuilder":
        """Enable/disable colored console output."""
        self._config.use_colors = enabled
        return self

    def with_color(self, level_name: str, color: str) -> "RegistryBuilder":
        """
        Override the console color of one level.

        Example:
            registry = (RegistryBuilder()
                .with_console(colored=True)
                .with_color("info", "#888")
                .build())
        """
        self._colors[level_name] = color
        return self

    def add_default_appender(self, appender: Appender) -> "RegistryBuilder":
        """
        Add a default appender.

        Args:
            appender: Callable taking (logger_name, level_name, args)

        Returns:
            Self for method chaining
        """
        self._default_appenders.append(appender)
        return self

    def build(self) -> Registry:
        """Build and return configured registry."""
        # Re-run validation on the collected settings
        config = RegistryConfig(
            default_level=self._config.default_level,
            console_output=self._config.console_output,
            use_colors=self._config.use_colors,
            colors={**self._config.colors, **self._colors},
            stream=self._config.stream,
        )
        registry = Registry.from_config(config)

        for appender in self._default_appenders:
            registry.add_default_appender(appender)

        return registry
