"""
Builder example: assembling a pizza step by step.

``CustomPizzaBuilder`` exposes fluent setters, each touching only its own
field, and ``build`` freezes the current configuration into an immutable
``Pizza``. ``PizzaDirector`` packages named recipes on top of the builder.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..logging.config import get_pattern_logger

logger = get_pattern_logger(__name__, "builder")


@dataclass(frozen=True)
class Pizza:
    """The finished product."""
    size: str
    crust: str
    toppings: tuple[str, ...]
    sauce: str

    def to_json(self) -> str:
        data = asdict(self)
        data["toppings"] = list(self.toppings)
        return json.dumps(data, separators=(",", ":"))

    def describe(self, console: Optional[BaseConsole] = None) -> None:
        (console or get_default_console()).write(self.to_json())


class PizzaBuilder(ABC):
    """Builder contract; every step returns the builder for chaining."""

    @abstractmethod
    def set_size(self, size: str) -> "PizzaBuilder":
        pass

    @abstractmethod
    def set_crust(self, crust: str) -> "PizzaBuilder":
        pass

    @abstractmethod
    def add_topping(self, topping: str) -> "PizzaBuilder":
        pass

    @abstractmethod
    def set_sauce(self, sauce: str) -> "PizzaBuilder":
        pass

    @abstractmethod
    def build(self) -> Pizza:
        pass


class CustomPizzaBuilder(PizzaBuilder):
    def __init__(self):
        self.size = "regular"
        self.crust = "thin"
        self.toppings: list[str] = []
        self.sauce = "tomato"

    def set_size(self, size: str) -> "CustomPizzaBuilder":
        self.size = size
        return self

    def set_crust(self, crust: str) -> "CustomPizzaBuilder":
        self.crust = crust
        return self

    def add_topping(self, topping: str) -> "CustomPizzaBuilder":
        self.toppings.append(topping)
        return self

    def set_sauce(self, sauce: str) -> "CustomPizzaBuilder":
        self.sauce = sauce
        return self

    def build(self) -> Pizza:
        pizza = Pizza(
            size=self.size,
            crust=self.crust,
            toppings=tuple(self.toppings),
            sauce=self.sauce,
        )
        logger.debug("Pizza built", size=pizza.size, toppings=len(pizza.toppings))
        return pizza


class PizzaDirector:
    """Knows the recipes; uses a fresh builder for each one."""

    def create_margherita(self) -> Pizza:
        return (
            CustomPizzaBuilder()
            .set_crust("Thin")
            .set_sauce("Marinara")
            .add_topping("Cheese")
            .add_topping("Basil")
            .set_size("Large")
            .build()
        )


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Build a custom pizza, then a margherita through the director."""
    console = console or get_default_console()

    custom_pizza = (
        CustomPizzaBuilder()
        .set_size("Large")
        .set_crust("Thin")
        .add_topping("Cheese")
        .add_topping("Pepperoni")
        .set_sauce("Spicy")
        .build()
    )
    custom_pizza.describe(console)

    director = PizzaDirector()
    margherita = director.create_margherita()
    margherita.describe(console)
