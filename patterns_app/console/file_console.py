"""File-based console output."""

import fcntl
import json
from datetime import datetime, timezone
from pathlib import Path

from ..config.defaults import ConsoleParams
from ..errors import ConsoleError
from .base import BaseConsole


class FileConsole(BaseConsole):
    """Appends example output lines to a file."""

    def __init__(self, name: str, config: ConsoleParams):
        super().__init__(name, config)
        self.config: ConsoleParams = config

        if not config.output_path:
            raise ConsoleError("File console requires an output_path", console_name=name)

        if config.format not in ["text", "jsonl"]:
            raise ConsoleError(f"Unsupported format: {config.format}", console_name=name)

        self.output_path = Path(config.output_path)

        try:
            if config.create_dirs:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)

            # Start from an empty file unless we are appending to previous runs
            if not config.append_mode:
                self.output_path.write_text("")
        except OSError as e:
            self.logger.error(
                "Console file setup failed",
                console_name=name,
                output_path=str(self.output_path),
                error=str(e)
            )
            raise ConsoleError(f"Cannot prepare output file: {e}", console_name=name) from e

    def write(self, line: str) -> None:
        try:
            with open(self.output_path, 'a') as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                if self.config.format == "jsonl":
                    json.dump({
                        "console": self.name,
                        "line": line,
                        "written_at": datetime.now(timezone.utc).isoformat(),
                    }, f)
                    f.write('\n')
                else:
                    f.write(f"{line}\n")
        except OSError as e:
            self._error_count += 1
            self.logger.error(
                "Console file write failed",
                console_name=self.name,
                output_path=str(self.output_path),
                error=str(e)
            )
            raise ConsoleError(f"File system error: {e}", console_name=self.name) from e

        self._line_count += 1

    def health_check(self) -> bool:
        """Check if the output directory is writable."""
        try:
            test_file = self.output_path.parent / ".health_check_test"
            test_file.write_text("test")
            test_file.unlink()
            return True

        except OSError as e:
            self.logger.warning(
                "Health check failed",
                console_name=self.name,
                error=str(e)
            )
            return False
