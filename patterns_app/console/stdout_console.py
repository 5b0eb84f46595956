"""Standard output console."""

import sys

from .base import BaseConsole


class StdoutConsole(BaseConsole):
    """Prints each line to stdout."""

    def __init__(self, name: str = "stdout", config=None):
        super().__init__(name, config)

    def write(self, line: str) -> None:
        print(line, file=sys.stdout, flush=True)
        self._line_count += 1

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return sys.stdout.writable()
        except (AttributeError, ValueError):
            return False
