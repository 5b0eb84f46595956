"""
Example runner.

Runs catalogue examples one after another, each with its own merged
configuration, and records timing and outcome for a summary report.
"""

import time
from dataclasses import dataclass
from typing import Iterable, Optional

from .catalog import get_example, list_examples
from .config.defaults import ConsoleParams
from .config.loader import ConfigLoader
from .console import BaseConsole, create_console
from .logging.config import get_logger, log_example_result

logger = get_logger(__name__)


@dataclass
class ExampleResult:
    """Outcome of one example run."""
    name: str
    succeeded: bool
    duration_ms: int
    line_count: int
    error: Optional[Exception] = None


class ExampleRunner:
    """Manages execution of catalogue examples."""

    def __init__(
        self,
        loader: Optional[ConfigLoader] = None,
        console: Optional[BaseConsole] = None
    ) -> None:
        self.loader = loader or ConfigLoader.create()
        self.console_params: ConsoleParams = self.loader.build_config().console
        self.console = console or create_console(self.console_params)
        self.results: list[ExampleResult] = []
        self.logger = logger

    def _console_for(self, name: str, params: ConsoleParams) -> BaseConsole:
        """The shared console, unless the example configures its own."""
        if params == self.console_params:
            return self.console
        self.logger.debug("Using example console", example=name, method=params.method)
        return create_console(params, name=name)

    def run_example(self, name: str) -> ExampleResult:
        """Run a single example; unknown names raise ``CatalogError``."""
        spec = get_example(name)

        start_time = time.time()
        console: Optional[BaseConsole] = None
        lines_before = 0
        error: Optional[Exception] = None

        self.logger.info("Running example", example=name, category=spec.category)
        try:
            config = self.loader.build_config(name)
            console = self._console_for(name, config.console)
            lines_before = console.get_stats()["line_count"]
            spec.run(console, config)
        except Exception as e:
            error = e

        duration_ms = int((time.time() - start_time) * 1000)
        line_count = console.get_stats()["line_count"] - lines_before if console else 0
        result = ExampleResult(
            name=name,
            succeeded=error is None,
            duration_ms=duration_ms,
            line_count=line_count,
            error=error,
        )
        log_example_result(
            self.logger,
            name,
            result.succeeded,
            duration_ms,
            context={"error": str(error)} if error else None,
        )

        self.results.append(result)
        return result

    def run_all(self, names: Optional[Iterable[str]] = None) -> list[ExampleResult]:
        """
        Run the named examples, or the whole catalogue in order.

        Unknown names are rejected before anything runs. With
        ``runner.stop_on_error`` set, the first failure ends the run.
        """
        selected = list(names) if names else [spec.name for spec in list_examples()]
        for name in selected:
            get_example(name)

        stop_on_error = self.loader.build_config().runner.stop_on_error
        results = []
        for name in selected:
            result = self.run_example(name)
            results.append(result)
            if not result.succeeded and stop_on_error:
                self.logger.warning("Stopping after failed example", example=name)
                break

        return results

    def summary_lines(self, results: Optional[list[ExampleResult]] = None) -> list[str]:
        """Human-readable summary of ``results`` (default: every run so far)."""
        results = self.results if results is None else results
        succeeded = sum(1 for r in results if r.succeeded)

        lines = [
            "=" * 60,
            "Summary",
            "=" * 60,
            f"Total examples: {len(results)}",
            f"Successful    : {succeeded}",
            f"Failed        : {len(results) - succeeded}",
        ]
        for result in results:
            status = "ok" if result.succeeded else f"FAILED ({result.error})"
            lines.append(f"  {result.name}: {status} in {result.duration_ms}ms")
        return lines
