"""In-memory console used for capturing example output."""

from .base import BaseConsole


class MemoryConsole(BaseConsole):
    """Collects lines in a list instead of printing them."""

    def __init__(self, name: str = "memory", config=None):
        super().__init__(name, config)
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)
        self._line_count += 1

    def clear(self) -> None:
        """Drop captured lines."""
        self.lines.clear()

    def getvalue(self) -> str:
        """Captured output joined the way stdout would show it."""
        return "".join(f"{line}\n" for line in self.lines)

    def health_check(self) -> bool:
        return True
