"""Console appender with optional ANSI colors"""

import sys
from typing import Any, Optional, TextIO, Tuple

from simply_log.appenders.base_appender import BaseAppender
from simply_log.core.palette import ColorPalette, RESET_CODE

# Levels written to stderr when no stream is given
STDERR_LEVELS = frozenset({"error", "warn"})


class ConsoleAppender(BaseAppender):
    """
    Write ``<name>:<level> -> arg1 arg2 ...`` lines to the console.

    Colors come from the palette and are only used while its ``use_colors``
    switch is on, so toggling the switch affects appenders already attached.
    """

    def __init__(self, palette: Optional[ColorPalette] = None, stream: Optional[TextIO] = None):
        """
        Initialize console appender.

        Args:
            palette: Color palette (default: a private palette, colors off)
            stream: Output stream (default: sys.stderr for error and warn,
                    sys.stdout otherwise)
        """
        self.palette = palette if palette is not None else ColorPalette()
        self.stream = stream

    def _stream_for(self, level_name: str) -> TextIO:
        if self.stream is not None:
            return self.stream
        # Looked up per call so redirected sys streams are honored
        return sys.stderr if level_name in STDERR_LEVELS else sys.stdout

    def format_prefix(self, logger_name: str, level_name: str) -> str:
        """Render the line prefix, colored when enabled."""
        prefix = f"{logger_name}:{level_name} ->"
        if self.palette.use_colors:
            code = self.palette.ansi_code(level_name)
            if code:
                prefix = f"{code}{prefix}{RESET_CODE}"
        return prefix

    def append(self, logger_name: str, level_name: str, args: Tuple[Any, ...]) -> None:
        """Write one line for the message."""
        parts = [self.format_prefix(logger_name, level_name)]
        parts.extend(str(arg) for arg in args)

        stream = self._stream_for(level_name)
        stream.write(" ".join(parts) + "\n")
        stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleAppender(colored={self.palette.use_colors})"
