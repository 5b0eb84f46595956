#!/usr/bin/env python3
"""
Builder Demo - Pattern Catalogue

Builds a custom pizza with the fluent builder and a margherita through the
director, then shows the builder defaults.

Run: python examples/builder_demo.py
"""

from patterns_app.creational.builder import CustomPizzaBuilder, run
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🍕 Builder: custom pizza and a margherita")
    run()

    print("\n📋 Builder defaults")
    CustomPizzaBuilder().build().describe()


if __name__ == "__main__":
    main()
