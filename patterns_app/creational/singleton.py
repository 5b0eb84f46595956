"""
Singleton example: one database connection per process.

``DatabaseConnection.get_instance`` constructs the connection at most once,
even when several threads race on the first call. The fast path reads the
cached instance without locking; only a caller that sees no instance takes
the lock and checks again before constructing.
"""

import threading
import uuid
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..logging.config import get_pattern_logger

logger = get_pattern_logger(__name__, "singleton")


class DatabaseConnection:
    """Process-wide connection; obtain it through ``get_instance``."""

    _instance: Optional["DatabaseConnection"] = None
    _lock = threading.Lock()
    instances_created = 0

    def __init__(self):
        self.id = uuid.uuid4().hex[:12]
        type(self).instances_created += 1
        logger.info("Database connection created", connection_id=self.id)

    @classmethod
    def get_instance(cls) -> "DatabaseConnection":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current instance. Tests only."""
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0

    def connect(self, console: Optional[BaseConsole] = None) -> None:
        (console or get_default_console()).write(f"Connected to database with ID: {self.id}")


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Fetch the connection twice and show both are the same object."""
    console = console or get_default_console()

    db1 = DatabaseConnection.get_instance()
    db1.connect(console)

    db2 = DatabaseConnection.get_instance()
    db2.connect(console)

    console.write(str(db1 is db2))
