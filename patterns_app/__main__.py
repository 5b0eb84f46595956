"""
Command line entry point.

    python -m patterns_app                 # run every example
    python -m patterns_app strategy facade # run the named examples
    python -m patterns_app --list          # show the catalogue
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .catalog import list_examples
from .config.loader import ConfigLoader
from .errors import CatalogError, ConfigurationError, ConsoleError
from .logging.config import configure_logging
from .runner import ExampleRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patterns_app",
        description="Run object-oriented design pattern examples.",
    )
    parser.add_argument("examples", nargs="*", help="Example names (default: all)")
    parser.add_argument("--list", action="store_true", help="List the catalogue and exit")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding catalog.yaml")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for spec in list_examples():
            print(f"{spec.name:<18} {spec.category:<11} {spec.summary}")
        return 0

    loader = ConfigLoader.create(args.config_dir)
    try:
        base_config = loader.build_config()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        for error in e.errors:
            print(f"  {error.field}: {error.message} (value: {error.value!r})", file=sys.stderr)
        return 2

    configure_logging(
        level=base_config.logging.level,
        format_json=base_config.logging.format_json,
        include_timestamp=base_config.logging.include_timestamp,
    )

    try:
        runner = ExampleRunner(loader)
        results = runner.run_all(args.examples)
    except (CatalogError, ConsoleError) as e:
        print(str(e), file=sys.stderr)
        return 2

    failed = [r for r in results if not r.succeeded]
    if failed:
        for line in runner.summary_lines(results):
            print(line, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
