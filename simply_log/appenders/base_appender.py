"""
Base appender interface
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple


class BaseAppender(ABC):
    """
    Abstract base class for appenders.

    An appender receives every message its logger accepts. Plain functions
    with the same signature as ``append`` work too; subclasses of this class
    are callable so the logger treats both alike.
    """

    @abstractmethod
    def append(self, logger_name: str, level_name: str, args: Tuple[Any, ...]) -> None:
        """
        Deliver one accepted message.

        Args:
            logger_name: Name of the logger that accepted the message
            level_name: Lowercase level name ("error", "info", ...)
            args: Positional arguments of the logging call, in order
        """
        pass

    def __call__(self, logger_name: str, level_name: str, args: Tuple[Any, ...]) -> None:
        """Allow appenders to be callable."""
        self.append(logger_name, level_name, args)
