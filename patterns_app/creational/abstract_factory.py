"""
Abstract Factory example: themed families of UI widgets.

The concrete factory handed to ``Application`` is the only thing that
decides which theme gets rendered; the application sees just the
``UIFactory``, ``Button`` and ``TextInput`` contracts.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console


class Widget(ABC):
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    @abstractmethod
    def render(self) -> None:
        pass


class Button(Widget):
    """Button product contract."""


class TextInput(Widget):
    """Text input product contract."""


class DarkButton(Button):
    def render(self) -> None:
        self.console.write("Render Dark button")


class DarkTextInput(TextInput):
    def render(self) -> None:
        self.console.write("Render Dark text input")


class LightButton(Button):
    def render(self) -> None:
        self.console.write("Render Light button")


class LightTextInput(TextInput):
    def render(self) -> None:
        self.console.write("Render Light text input")


class UIFactory(ABC):
    """Creates one matching widget of each kind."""

    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_text_input(self) -> TextInput:
        pass


class DarkThemeFactory(UIFactory):
    def create_button(self) -> Button:
        return DarkButton(self.console)

    def create_text_input(self) -> TextInput:
        return DarkTextInput(self.console)


class LightThemeFactory(UIFactory):
    def create_button(self) -> Button:
        return LightButton(self.console)

    def create_text_input(self) -> TextInput:
        return LightTextInput(self.console)


class Application:
    """Client rendering whatever widgets its factory produces."""

    def __init__(self, factory: UIFactory):
        self.factory = factory

    def render(self) -> None:
        self.factory.create_button().render()
        self.factory.create_text_input().render()


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Render the same application with the dark and the light theme."""
    console = console or get_default_console()

    dark_app = Application(DarkThemeFactory(console))
    light_app = Application(LightThemeFactory(console))

    dark_app.render()
    light_app.render()
