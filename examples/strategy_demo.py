#!/usr/bin/env python3
"""
Strategy Demo - Pattern Catalogue

Prices the same cart under three discount strategies.

Run: python examples/strategy_demo.py
"""

from patterns_app.behavioral.strategy import run
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🛒 Strategy: one cart, three discounts")
    run()


if __name__ == "__main__":
    main()
