"""
Factory example: a shape factory selecting a variant by name.

``ShapeFactory.create_shape`` maps a discriminator string to a new shape
instance. Unknown names either fall back to the configured default shape
(with a warning in the log) or, in strict mode, raise
``UnknownVariantError``.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.defaults import CatalogConfig, FactoryParams
from ..console import BaseConsole, get_default_console
from ..errors import UnknownVariantError
from ..logging.config import get_pattern_logger

logger = get_pattern_logger(__name__, "factory")


class Shape(ABC):
    """Product contract."""

    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    @abstractmethod
    def draw(self) -> None:
        pass


class Circle(Shape):
    def draw(self) -> None:
        self.console.write("Drawing circle.")


class Rectangle(Shape):
    def draw(self) -> None:
        self.console.write("Drawing rectangle.")


class Square(Shape):
    def draw(self) -> None:
        self.console.write("Drawing square.")


class ShapeFactory:
    """Creates shapes by discriminator; never caches instances."""

    def __init__(
        self,
        console: Optional[BaseConsole] = None,
        params: Optional[FactoryParams] = None
    ):
        self.console = console or get_default_console()
        self.params = params or FactoryParams()
        self._registry: dict[str, type[Shape]] = {
            "Circle": Circle,
            "Rectangle": Rectangle,
            "Square": Square,
        }

        if self.params.default_shape not in self._registry:
            raise UnknownVariantError(
                f"Default shape is not a known shape: {self.params.default_shape}",
                discriminator=self.params.default_shape,
                known=self.known_shapes(),
            )

    def register(self, shape_type: str, shape_cls: type[Shape]) -> None:
        """Make ``shape_type`` produce ``shape_cls`` from now on."""
        self._registry[shape_type] = shape_cls
        logger.debug("Shape registered", shape_type=shape_type, shape_cls=shape_cls.__name__)

    def known_shapes(self) -> list[str]:
        return sorted(self._registry)

    def create_shape(self, shape_type: str) -> Shape:
        shape_cls = self._registry.get(shape_type)

        if shape_cls is None:
            if self.params.strict:
                raise UnknownVariantError(
                    f"Unknown shape type: {shape_type}",
                    discriminator=shape_type,
                    known=self.known_shapes(),
                )

            logger.warning(
                "Unknown shape type, using default",
                shape_type=shape_type,
                default_shape=self.params.default_shape
            )
            shape_cls = self._registry[self.params.default_shape]

        return shape_cls(self.console)


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Create and draw one shape of each kind."""
    console = console or get_default_console()
    factory = ShapeFactory(console, config.factory if config else None)

    circle = factory.create_shape("Circle")
    square = factory.create_shape("Square")
    rectangle = factory.create_shape("Rectangle")

    circle.draw()
    square.draw()
    rectangle.draw()
