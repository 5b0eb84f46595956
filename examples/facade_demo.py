#!/usr/bin/env python3
"""
Facade Demo - Pattern Catalogue

Drives three appliances through one home-automation facade, including the
party mode.

Run: python examples/facade_demo.py
"""

from patterns_app.structural.facade import (
    AirConditioner,
    HomeAutomationFacade,
    Lights,
    MusicSystem,
    run,
)
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🏠 Facade: on, movie mode, off")
    run()

    print("\n🎉 Party mode")
    HomeAutomationFacade(AirConditioner(), MusicSystem(), Lights()).set_party_mode()


if __name__ == "__main__":
    main()
