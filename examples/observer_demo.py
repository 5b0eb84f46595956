#!/usr/bin/env python3
"""
Observer Demo - Pattern Catalogue

Subscribes three displays to a weather station and publishes readings,
then shows that an unsubscribed display stops receiving updates.

Run: python examples/observer_demo.py
"""

from patterns_app.behavioral.observer import (
    HumidityDisplay,
    TemperatureDisplay,
    WeatherData,
    WeatherStation,
    run,
)
from patterns_app.logging import configure_logging


def main() -> None:
    configure_logging()
    print("🌦️  Observer: three readings, three displays")
    run()

    print("\n🔕 Unsubscribing the humidity display")
    station = WeatherStation()
    temperature = TemperatureDisplay()
    humidity = HumidityDisplay()
    station.subscribe(temperature)
    station.subscribe(humidity)
    station.unsubscribe(humidity)
    station.set_weather_data(WeatherData(temperature=21, humidity=55))


if __name__ == "__main__":
    main()
