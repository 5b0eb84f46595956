#!/usr/bin/env python3
"""
Abstract Factory Demo - Pattern Catalogue

Renders the same application with a dark and a light widget family.

Run: python examples/abstract_factory_demo.py
"""

from patterns_app.creational.abstract_factory import run
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🎨 Abstract Factory: dark and light themes")
    run()


if __name__ == "__main__":
    main()
