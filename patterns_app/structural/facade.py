"""
Facade example: one home-automation front for three appliances.

``HomeAutomationFacade`` turns each coarse command into a fixed sequence of
subsystem calls. Callers never touch the appliances directly.
"""

from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..utils.formatting import Number, format_number


class Lights:
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def turn_on(self) -> None:
        self.console.write("Turning on Lights")

    def turn_off(self) -> None:
        self.console.write("Turning off Lights")

    def dim(self, level: Number) -> None:
        self.console.write(f"Dim Lights to {format_number(level)}")


class MusicSystem:
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def turn_on(self) -> None:
        self.console.write("Turning on Music System")

    def turn_off(self) -> None:
        self.console.write("Turning off Music System")

    def play(self, song: str) -> None:
        self.console.write(f"Playing : {song}")

    def set_volume(self, level: Number) -> None:
        self.console.write(f"Setting volume to {format_number(level)}")


class AirConditioner:
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def turn_on(self) -> None:
        self.console.write("Turning on AC")

    def turn_off(self) -> None:
        self.console.write("Turning off AC")

    def set_temperature(self, level: Number) -> None:
        self.console.write(f"Setting temperature to {format_number(level)}")


class HomeAutomationFacade:
    def __init__(self, ac: AirConditioner, music_system: MusicSystem, lights: Lights):
        self.ac = ac
        self.music_system = music_system
        self.lights = lights

    def turn_on(self) -> None:
        self.ac.turn_on()
        self.music_system.turn_on()
        self.lights.turn_on()

    def turn_off(self) -> None:
        self.ac.turn_off()
        self.music_system.turn_off()
        self.lights.turn_off()

    def set_movie_mode(self) -> None:
        self.ac.set_temperature(22)
        self.lights.dim(30)
        self.music_system.play("Relaxing song")

    def set_party_mode(self) -> None:
        self.lights.turn_on()
        self.music_system.set_volume(80)
        self.music_system.play("Party song")


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Switch everything on, set movie mode, switch everything off."""
    console = console or get_default_console()

    home = HomeAutomationFacade(
        AirConditioner(console),
        MusicSystem(console),
        Lights(console),
    )

    home.turn_on()
    home.set_movie_mode()
    home.turn_off()
