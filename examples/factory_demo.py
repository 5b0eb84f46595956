#!/usr/bin/env python3
"""
Factory Demo - Pattern Catalogue

Draws one shape of each kind, then asks for an unknown shape twice: once
from the permissive factory (falls back to a circle) and once from a strict
factory (raises).

Run: python examples/factory_demo.py
"""

from patterns_app.config.defaults import FactoryParams
from patterns_app.creational.factory import ShapeFactory, run
from patterns_app.errors import UnknownVariantError
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🔷 Factory: shapes by name")
    run()

    print("\n❓ Unknown shape, permissive factory")
    ShapeFactory().create_shape("Hexagon").draw()

    print("\n⛔ Unknown shape, strict factory")
    try:
        ShapeFactory(params=FactoryParams(strict=True)).create_shape("Hexagon")
    except UnknownVariantError as e:
        print(f"  {e} (known: {', '.join(e.known)})")


if __name__ == "__main__":
    main()
