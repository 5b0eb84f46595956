"""
Observer example: a weather station broadcasting readings to displays.

The station keeps an ordered list of subscribers and pushes every new
reading to each of them synchronously. Notification walks a snapshot of the
list taken when ``notify`` starts, so a display that subscribes or
unsubscribes from inside ``update`` only affects the next reading.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import CatalogConfig
from ..console import BaseConsole, get_default_console
from ..logging.config import get_pattern_logger
from ..utils.formatting import Number, format_number

logger = get_pattern_logger(__name__, "observer")


@dataclass(frozen=True)
class WeatherData:
    """One weather reading."""
    temperature: Number
    humidity: Number


class Observer(ABC):
    """Receives weather readings from a subject."""

    @abstractmethod
    def update(self, data: WeatherData) -> None:
        """Handle a new reading."""


class Subject(ABC):
    """Keeps observers and notifies them of state changes."""

    @abstractmethod
    def subscribe(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def unsubscribe(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass


class WeatherStation(Subject):
    """Concrete subject holding the latest reading."""

    def __init__(self):
        self._observers: list[Observer] = []
        self._data = WeatherData(temperature=0, humidity=0)

    @property
    def data(self) -> WeatherData:
        return self._data

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def subscribe(self, observer: Observer) -> None:
        # No duplicate check: subscribing twice means being notified twice
        self._observers.append(observer)
        logger.debug(
            "Observer subscribed",
            observer=type(observer).__name__,
            subscriber_count=len(self._observers)
        )

    def unsubscribe(self, observer: Observer) -> None:
        remaining = [obs for obs in self._observers if obs is not observer]
        removed = len(self._observers) - len(remaining)
        self._observers = remaining
        logger.debug(
            "Observer unsubscribed",
            observer=type(observer).__name__,
            removed=removed,
            subscriber_count=len(self._observers)
        )

    def set_weather_data(self, data: WeatherData) -> None:
        self._data = data
        self.notify()

    def notify(self) -> None:
        snapshot = list(self._observers)
        logger.debug("Notifying observers", subscriber_count=len(snapshot))
        for observer in snapshot:
            observer.update(self._data)


class TemperatureDisplay(Observer):
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def update(self, data: WeatherData) -> None:
        self.console.write_lines([
            "############################",
            f"Temperature : {format_number(data.temperature)}",
            "############################",
        ])


class HumidityDisplay(Observer):
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def update(self, data: WeatherData) -> None:
        self.console.write_lines([
            "############################",
            f"Humidity : {format_number(data.humidity)}",
            "############################",
        ])


class StatisticsDisplay(Observer):
    def __init__(self, console: Optional[BaseConsole] = None):
        self.console = console or get_default_console()

    def update(self, data: WeatherData) -> None:
        self.console.write_lines([
            "---------------------------------",
            "Statistical Data : ",
            f"Temperature : {format_number(data.temperature)}",
            f"Humidity : {format_number(data.humidity)}",
            "---------------------------------",
        ])


def run(console: Optional[BaseConsole] = None, config: Optional[CatalogConfig] = None) -> None:
    """Subscribe three displays and publish three readings."""
    console = console or get_default_console()

    weather_station = WeatherStation()
    weather_station.subscribe(TemperatureDisplay(console))
    weather_station.subscribe(HumidityDisplay(console))
    weather_station.subscribe(StatisticsDisplay(console))

    weather_station.set_weather_data(WeatherData(temperature=35, humidity=20))
    weather_station.set_weather_data(WeatherData(temperature=45, humidity=10))
    weather_station.set_weather_data(WeatherData(temperature=-5, humidity=15))
