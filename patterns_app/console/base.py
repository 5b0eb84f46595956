"""Base class for console output sinks."""

from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..logging.config import get_logger


class BaseConsole(ABC):
    """Base class for the sinks examples write their lines to."""

    def __init__(self, name: str, config: Any = None):
        self.name = name
        self.config = config
        self.logger = get_logger(f"patterns.console.{name}")
        self._line_count = 0
        self._error_count = 0

    @abstractmethod
    def write(self, line: str) -> None:
        """
        Write one line of example output.

        Args:
            line: Text without a trailing newline
        """

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the sink can currently accept output."""

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write several lines in order."""
        for line in lines:
            self.write(line)

    def get_stats(self) -> dict[str, Any]:
        """Get output statistics."""
        return {
            "name": self.name,
            "line_count": self._line_count,
            "error_count": self._error_count,
        }

    def reset_stats(self):
        """Reset output statistics."""
        self._line_count = 0
        self._error_count = 0
