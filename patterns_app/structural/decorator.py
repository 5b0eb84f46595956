"""
Decorator example: coffee add-ons layered by composition.

Every add-on holds the coffee it wraps and calls through to it, adding its
own price and description suffix. Costs add up in any order; descriptions
read innermost first, so nesting order shows in the text.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..utils.formatting import Number, format_number


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> Number:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class PlainCoffee(Coffee):
    def cost(self) -> Number:
        return 100

    def description(self) -> str:
        return "Plain Coffee"


class MilkDecorator(Coffee):
    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def cost(self) -> Number:
        return self.coffee.cost() + 50

    def description(self) -> str:
        return self.coffee.description() + " Milk"


class SugarDecorator(Coffee):
    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def cost(self) -> Number:
        return self.coffee.cost() + 20

    def description(self) -> str:
        return self.coffee.description() + " Sugar"


class CaramelDecorator(Coffee):
    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def cost(self) -> Number:
        return self.coffee.cost() + 100

    def description(self) -> str:
        return self.coffee.description() + " Caramel"


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Describe and price two decorated orders."""
    console = console or get_default_console()

    for order in (
        SugarDecorator(MilkDecorator(PlainCoffee())),
        CaramelDecorator(MilkDecorator(PlainCoffee())),
    ):
        console.write(f"Description : {order.description()}")
        console.write(f"Cost : {format_number(order.cost())}")
