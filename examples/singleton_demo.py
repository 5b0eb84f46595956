#!/usr/bin/env python3
"""
Singleton Demo - Pattern Catalogue

Fetches the database connection twice, then from eight threads at once, and
reports how many connections were ever constructed.

Run: python examples/singleton_demo.py
"""

from concurrent.futures import ThreadPoolExecutor

from patterns_app.creational.singleton import DatabaseConnection, run
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🔒 Singleton: one connection per process")
    run()

    print("\n🧵 Eight threads asking at once")
    with ThreadPoolExecutor(max_workers=8) as pool:
        connections = list(pool.map(lambda _: DatabaseConnection.get_instance(), range(8)))
    print(f"  distinct connections: {len({id(c) for c in connections})}")
    print(f"  constructed: {DatabaseConnection.instances_created}")


if __name__ == "__main__":
    main()
