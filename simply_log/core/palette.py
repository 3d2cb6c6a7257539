"""
Level color palette

Holds the level -> color table used by the console appender and the
switch that turns colored output on.
"""

from __future__ import annotations
import threading
from typing import Dict, Optional, Union

from simply_log.core.log_level import LEVEL_NAMES, LEVEL_RANKS

DEFAULT_COLORS: Dict[str, str] = {
    "error": "#F00",    # Red
    "info": "#000",     # Black
    "warn": "#FF0",     # Yellow
    "debug": "#0F0",    # Green
    "trace": "#00F",    # Blue
}

RESET_CODE = "\033[0m"


class ColorPalette:
    """Mutable level -> color mapping."""

    def __init__(self, colors: Optional[Dict[str, str]] = None, use_colors: bool = False):
        self._colors: Dict[str, str] = dict(DEFAULT_COLORS)
        self._lock = threading.Lock()
        self.use_colors = use_colors
        if colors:
            validate_colors(colors)
            for level, value in colors.items():
                self.color(level, value)

    def _resolve(self, level: Union[int, str]) -> Optional[str]:
        """Map a rank or case-insensitive name to a palette key."""
        if isinstance(level, bool):
            return None
        if isinstance(level, str):
            text = level.strip()
            if text.isdigit():
                return LEVEL_NAMES.get(int(text))
            name = text.lower()
            return name if name in LEVEL_RANKS else None
        if isinstance(level, int):
            return LEVEL_NAMES.get(int(level))
        return None

    def color(self, level: Union[int, str], new_color: Optional[str] = None) -> Optional[str]:
        """
        Get or set the color of a level.

        Args:
            level: Rank or level name (case-insensitive)
            new_color: New color; applied only when it is a string of at
                       least three characters. A missing leading ``#`` is added.

        Returns:
            The level's current color, or None for an unrecognized level
        """
        name = self._resolve(level)
        if name is None or name not in self._colors:
            return None
        if isinstance(new_color, str) and len(new_color) >= 3:
            if not new_color.startswith("#"):
                new_color = "#" + new_color
            with self._lock:
                self._colors[name] = new_color
        return self._colors[name]

    def get(self, level_name: str) -> Optional[str]:
        """Color for a level name, without resolving ranks."""
        return self._colors.get(level_name)

    def as_dict(self) -> Dict[str, str]:
        """Copy of the current table."""
        return dict(self._colors)

    def ansi_code(self, level_name: str) -> str:
        """
        ANSI 24-bit foreground escape for a level.

        Returns an empty string when the level has no color or the color is
        not a ``#RGB`` / ``#RRGGBB`` value.
        """
        rgb = hex_to_rgb(self._colors.get(level_name))
        if rgb is None:
            return ""
        return "\033[38;2;{};{};{}m".format(*rgb)


def validate_colors(colors: Dict[str, str]) -> None:
    """
    Check a level -> color table given as configuration.

    Raises:
        ValueError: For keys that are not level names or colors shorter
                    than three characters
    """
    for level_name, value in colors.items():
        if not isinstance(level_name, str) or level_name.lower() not in LEVEL_RANKS:
            raise ValueError(f"colors has unknown level: {level_name!r}")
        if not isinstance(value, str) or len(value) < 3:
            raise ValueError(f"invalid color for {level_name}: {value!r}")


def hex_to_rgb(value: Optional[str]):
    """Parse ``#RGB`` or ``#RRGGBB``; None when unparseable."""
    if not value or not value.startswith("#"):
        return None
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        return None
    try:
        return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None
