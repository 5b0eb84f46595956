"""
Adapter example: two payment gateways behind one processor contract.

The legacy and modern gateways expose incompatible method names. Each
adapter wraps one gateway and translates ``process_payment`` and
``refund_payment`` into the gateway's own calls.
``create_payment_processor`` picks the adapter from configuration.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..errors import UnknownVariantError
from ..logging.config import get_pattern_logger
from ..utils.formatting import Number, format_number

logger = get_pattern_logger(__name__, "adapter")


class PaymentProcessor(ABC):
    """Target interface the checkout code is written against."""

    @abstractmethod
    def process_payment(self, amount: Number) -> None:
        pass

    @abstractmethod
    def refund_payment(self, amount: Number) -> None:
        pass


class LegacyPaymentGateway:
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def make_payment(self, amount: Number) -> None:
        self.console.write(f"Processing Legacy payment : {format_number(amount)}")

    def cancel_payment(self, amount: Number) -> None:
        self.console.write(f"Refunding Legacy payment : {format_number(amount)}")


class ModernPaymentGateway:
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def pay(self, amount: Number) -> None:
        self.console.write(f"Processing Modern payment : {format_number(amount)}")

    def reverse(self, amount: Number) -> None:
        self.console.write(f"Refunding Modern payment : {format_number(amount)}")


class LegacyPaymentAdapter(PaymentProcessor):
    def __init__(self, gateway: LegacyPaymentGateway):
        self.gateway = gateway

    def process_payment(self, amount: Number) -> None:
        logger.debug("Adapting payment", gateway="legacy", call="make_payment", amount=amount)
        self.gateway.make_payment(amount)

    def refund_payment(self, amount: Number) -> None:
        logger.debug("Adapting refund", gateway="legacy", call="cancel_payment", amount=amount)
        self.gateway.cancel_payment(amount)


class ModernPaymentAdapter(PaymentProcessor):
    def __init__(self, gateway: ModernPaymentGateway):
        self.gateway = gateway

    def process_payment(self, amount: Number) -> None:
        logger.debug("Adapting payment", gateway="modern", call="pay", amount=amount)
        self.gateway.pay(amount)

    def refund_payment(self, amount: Number) -> None:
        logger.debug("Adapting refund", gateway="modern", call="reverse", amount=amount)
        self.gateway.reverse(amount)


def create_payment_processor(gateway: str, console: Optional[BaseConsole] = None) -> PaymentProcessor:
    """Wrap the named gateway in its adapter."""
    if gateway == "legacy":
        return LegacyPaymentAdapter(LegacyPaymentGateway(console))
    if gateway == "modern":
        return ModernPaymentAdapter(ModernPaymentGateway(console))

    raise UnknownVariantError(
        f"Unknown payment gateway: {gateway}",
        discriminator=gateway,
        known=["legacy", "modern"],
    )


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Charge and refund through each adapter, configured gateway first."""
    console = console or get_default_console()
    first = config.payment.gateway if config else "legacy"
    second = "modern" if first == "legacy" else "legacy"

    for gateway in (first, second):
        processor = create_payment_processor(gateway, console)
        processor.process_payment(123)
        processor.refund_payment(30)
