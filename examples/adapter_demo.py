#!/usr/bin/env python3
"""
Adapter Demo - Pattern Catalogue

Charges and refunds through the legacy and the modern gateway using the
same ``PaymentProcessor`` calls.

Run: python examples/adapter_demo.py
"""

from patterns_app.logging import configure_logging
from patterns_app.structural.adapter import PaymentProcessor, create_payment_processor, run


def checkout(processor: PaymentProcessor, amount: float) -> None:
    """Client code: only knows the target interface."""
    processor.process_payment(amount)


def main() -> None:
    configure_logging()
    print("🔌 Adapter: two gateways, one interface")
    run()

    print("\n💳 Checkout through the modern gateway")
    checkout(create_payment_processor("modern"), 49.5)


if __name__ == "__main__":
    main()
