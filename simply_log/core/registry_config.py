"""
Registry configuration management
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, TextIO

from simply_log.core.log_level import LogLevel, LevelLike, to_rank
from simply_log.core.palette import DEFAULT_COLORS, validate_colors


@dataclass
class RegistryConfig:
    """
    Registry configuration.

    Holds the settings a Registry starts with; every one of them can still
    be changed on the registry afterwards.
    """

    # Level settings
    default_level: LevelLike = LogLevel.INFO

    # Console settings
    console_output: bool = False    # Console appender as a default appender
    use_colors: bool = False
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    stream: Optional[TextIO] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.default_level = to_rank(self.default_level)
        if self.default_level < LogLevel.OFF:
            raise ValueError("default_level cannot be negative")

        validate_colors(self.colors)

    @classmethod
    def default(cls) -> "RegistryConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "RegistryConfig":
        """Create configuration for debugging."""
        return cls(
            default_level=LogLevel.DEBUG,
            console_output=True,
            use_colors=True,
        )

    @classmethod
    def production_config(cls) -> "RegistryConfig":
        """Create configuration for production."""
        return cls(
            default_level=LogLevel.ERROR,
            console_output=True,
            use_colors=False,
        )

    @classmethod
    def silent_config(cls) -> "RegistryConfig":
        """Create configuration with every new logger switched off."""
        return cls(default_level=LogLevel.OFF)
