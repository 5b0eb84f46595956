"""
Registry of the runnable pattern examples.

Order matters: it is the order ``run all`` walks the catalogue in.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .behavioral import observer, strategy
from .config.defaults import CatalogConfig
from .console import BaseConsole
from .creational import abstract_factory, builder, factory, singleton
from .errors import CatalogError
from .structural import adapter, decorator, facade

ExampleFn = Callable[[Optional[BaseConsole], Optional[CatalogConfig]], None]


@dataclass(frozen=True)
class ExampleSpec:
    """One catalogue entry."""
    name: str
    category: str
    summary: str
    run: ExampleFn


CATALOG: dict[str, ExampleSpec] = {
    spec.name: spec
    for spec in [
        ExampleSpec("observer", "behavioral",
                    "Weather station broadcasting readings to displays", observer.run),
        ExampleSpec("strategy", "behavioral",
                    "Cart totals under swappable discount strategies", strategy.run),
        ExampleSpec("factory", "creational",
                    "Shape factory selecting a variant by name", factory.run),
        ExampleSpec("abstract_factory", "creational",
                    "Dark and light widget families", abstract_factory.run),
        ExampleSpec("builder", "creational",
                    "Fluent pizza builder and a recipe director", builder.run),
        ExampleSpec("singleton", "creational",
                    "One database connection per process", singleton.run),
        ExampleSpec("adapter", "structural",
                    "Legacy and modern gateways behind one processor", adapter.run),
        ExampleSpec("decorator", "structural",
                    "Coffee add-ons layered by composition", decorator.run),
        ExampleSpec("facade", "structural",
                    "Home automation over three appliances", facade.run),
    ]
}


def list_examples(category: Optional[str] = None) -> list[ExampleSpec]:
    """Catalogue entries in run order, optionally for one category."""
    return [
        spec for spec in CATALOG.values()
        if category is None or spec.category == category
    ]


def get_example(name: str) -> ExampleSpec:
    try:
        return CATALOG[name]
    except KeyError:
        raise CatalogError(
            f"Unknown example: {name}",
            example_name=name,
            context={"known": list(CATALOG)},
        ) from None
