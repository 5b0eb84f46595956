"""Console selection from configuration."""

from typing import Optional

from ..config.defaults import ConsoleParams
from ..errors import ConsoleError
from ..logging.config import get_logger
from .base import BaseConsole
from .file_console import FileConsole
from .memory_console import MemoryConsole
from .stdout_console import StdoutConsole

logger = get_logger(__name__)


def create_console(params: Optional[ConsoleParams] = None, name: Optional[str] = None) -> BaseConsole:
    """
    Create the console sink named by ``params.method``.

    Raises:
        ConsoleError: If the method is unknown or the sink fails its health check
    """
    params = params or ConsoleParams()
    name = name or params.method

    if params.method == "stdout":
        console: BaseConsole = StdoutConsole(name, params)
    elif params.method == "file":
        console = FileConsole(name, params)
    elif params.method == "memory":
        console = MemoryConsole(name, params)
    else:
        raise ConsoleError(f"Unsupported console method: {params.method}", console_name=name)

    if not console.health_check():
        raise ConsoleError(f"Console failed health check: {name}", console_name=name)

    logger.debug("Console created", console_name=name, method=params.method)
    return console


def get_default_console() -> BaseConsole:
    """Console used when an example is given none: plain stdout."""
    return StdoutConsole()
