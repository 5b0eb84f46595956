"""
Strategy example: a shopping cart with interchangeable discount policies.

The cart only knows the ``DiscountStrategy`` contract. Swapping the strategy
takes effect on the very next ``total_price`` call since nothing is cached.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..logging.config import get_pattern_logger
from ..utils.formatting import Number, format_number

logger = get_pattern_logger(__name__, "strategy")


class DiscountStrategy(ABC):
    """Turns a gross price into the price actually charged."""

    @abstractmethod
    def apply_discount(self, price: Number) -> Number:
        pass


class NoDiscountStrategy(DiscountStrategy):
    def apply_discount(self, price: Number) -> Number:
        return price


class FlatDiscountStrategy(DiscountStrategy):
    """Subtracts a fixed amount."""

    def __init__(self, discount_amount: Number):
        self.discount_amount = discount_amount

    def apply_discount(self, price: Number) -> Number:
        return price - self.discount_amount


class PercentageDiscountStrategy(DiscountStrategy):
    """Takes ``discount_rate`` percent off."""

    def __init__(self, discount_rate: Number):
        self.discount_rate = discount_rate

    def apply_discount(self, price: Number) -> Number:
        return price * (1 - (self.discount_rate / 100))


@dataclass(frozen=True)
class LineItem:
    """A product line in the cart."""
    name: str
    price: Number
    quantity: int


class Cart:
    """Strategy context: sums line items and delegates the discount."""

    def __init__(self, strategy: DiscountStrategy):
        self.items: list[LineItem] = []
        self.strategy = strategy

    def add_item(self, item: LineItem) -> None:
        self.items.append(item)

    def set_discount_strategy(self, strategy: DiscountStrategy) -> None:
        logger.debug(
            "Discount strategy changed",
            previous=type(self.strategy).__name__,
            current=type(strategy).__name__
        )
        self.strategy = strategy

    def subtotal(self) -> Number:
        return sum(item.price * item.quantity for item in self.items)

    def total_price(self) -> Number:
        return self.strategy.apply_discount(self.subtotal())


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Price one cart under three discount strategies."""
    console = console or get_default_console()

    cart = Cart(NoDiscountStrategy())
    cart.add_item(LineItem(name="Shirt", price=20, quantity=2))
    cart.add_item(LineItem(name="Jeans", price=50, quantity=1))
    console.write(f"No Discount : {format_number(cart.total_price())}")

    cart.set_discount_strategy(FlatDiscountStrategy(10))
    console.write(f"Flat Discount : {format_number(cart.total_price())}")

    cart.set_discount_strategy(PercentageDiscountStrategy(10))
    console.write(f"Percentage Discount : {format_number(cart.total_price())}")
