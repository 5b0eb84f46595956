#!/usr/bin/env python3
"""
Run All Examples - Pattern Catalogue

Runs every catalogue example in order through the package's
``ExampleRunner``, printing a header before each one and a summary with
timings at the end.

Run: python examples/run_all_examples.py
"""

import sys
import time

from patterns_app.catalog import list_examples
from patterns_app.logging.config import configure_logging
from patterns_app.runner import ExampleRunner


def main():
    """Main function to run all examples."""
    configure_logging(level="WARNING")

    print("🎯 DESIGN PATTERN EXAMPLE SUITE")
    print("=" * 60)

    examples = list_examples()
    print("📋 EXAMPLE SCHEDULE:")
    for i, spec in enumerate(examples, 1):
        print(f"  {i}. {spec.name} ({spec.category}) - {spec.summary}")

    start_time = time.time()
    runner = ExampleRunner()

    for i, spec in enumerate(examples, 1):
        print(f"\n{'=' * 60}")
        print(f"🚀 RUNNING {i}/{len(examples)}: {spec.name}")
        print(f"{'=' * 60}")
        result = runner.run_example(spec.name)
        if not result.succeeded:
            print(f"❌ ERROR in {spec.name}: {type(result.error).__name__}: {result.error}")

    print()
    for line in runner.summary_lines():
        print(line)
    print(f"\n🏁 Example suite completed in {time.time() - start_time:.2f}s")

    if not all(result.succeeded for result in runner.results):
        sys.exit(1)


if __name__ == "__main__":
    main()
