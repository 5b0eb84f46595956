"""Output sinks that pattern examples print through."""

from .base import BaseConsole
from .factory import create_console, get_default_console
from .file_console import FileConsole
from .memory_console import MemoryConsole
from .stdout_console import StdoutConsole

__all__ = [
    "BaseConsole",
    "FileConsole",
    "MemoryConsole",
    "StdoutConsole",
    "create_console",
    "get_default_console",
]
