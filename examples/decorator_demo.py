#!/usr/bin/env python3
"""
Decorator Demo - Pattern Catalogue

Prices two decorated coffees, then shows that cost ignores wrapping order
while the description follows it.

Run: python examples/decorator_demo.py
"""

from patterns_app.structural.decorator import MilkDecorator, PlainCoffee, SugarDecorator, run
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("☕ Decorator: coffee add-ons")
    run()

    print("\n🔁 Same add-ons, other order")
    order = MilkDecorator(SugarDecorator(PlainCoffee()))
    print(f"Description : {order.description()}")
    print(f"Cost : {order.cost()}")


if __name__ == "__main__":
    main()
