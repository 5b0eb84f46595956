"""End-to-end output of every catalogue example and demo script."""

import importlib.util
from pathlib import Path

import pytest

from patterns_app.catalog import get_example, list_examples
from patterns_app.console import MemoryConsole
from patterns_app.creational.singleton import DatabaseConnection

EXAMPLES_DIR = Path(__file__).resolve().parent.parent.parent / "examples"


def _observer_block(temperature: str, humidity: str) -> list[str]:
    return [
        "############################",
        f"Temperature : {temperature}",
        "############################",
        "############################",
        f"Humidity : {humidity}",
        "############################",
        "---------------------------------",
        "Statistical Data : ",
        f"Temperature : {temperature}",
        f"Humidity : {humidity}",
        "---------------------------------",
    ]


EXPECTED_OUTPUT = {
    "observer": (
        _observer_block("35", "20")
        + _observer_block("45", "10")
        + _observer_block("-5", "15")
    ),
    "strategy": [
        "No Discount : 90",
        "Flat Discount : 80",
        "Percentage Discount : 81",
    ],
    "factory": ["Drawing circle.", "Drawing square.", "Drawing rectangle."],
    "abstract_factory": [
        "Render Dark button",
        "Render Dark text input",
        "Render Light button",
        "Render Light text input",
    ],
    "builder": [
        '{"size":"Large","crust":"Thin","toppings":["Cheese","Pepperoni"],"sauce":"Spicy"}',
        '{"size":"Large","crust":"Thin","toppings":["Cheese","Basil"],"sauce":"Marinara"}',
    ],
    "adapter": [
        "Processing Legacy payment : 123",
        "Refunding Legacy payment : 30",
        "Processing Modern payment : 123",
        "Refunding Modern payment : 30",
    ],
    "decorator": [
        "Description : Plain Coffee Milk Sugar",
        "Cost : 170",
        "Description : Plain Coffee Milk Caramel",
        "Cost : 250",
    ],
    "facade": [
        "Turning on AC",
        "Turning on Music System",
        "Turning on Lights",
        "Setting temperature to 22",
        "Dim Lights to 30",
        "Playing : Relaxing song",
        "Turning off AC",
        "Turning off Music System",
        "Turning off Lights",
    ],
}


@pytest.mark.parametrize("name", sorted(EXPECTED_OUTPUT))
def test_example_output(name, empty_loader) -> None:
    """Each example prints exactly its documented lines, in order."""
    console = MemoryConsole()
    get_example(name).run(console, empty_loader.build_config(name))
    assert console.lines == EXPECTED_OUTPUT[name]


def test_singleton_example_output(empty_loader) -> None:
    console = MemoryConsole()
    get_example("singleton").run(console, empty_loader.build_config("singleton"))

    connection_id = DatabaseConnection.get_instance().id
    assert console.lines == [
        f"Connected to database with ID: {connection_id}",
        f"Connected to database with ID: {connection_id}",
        "True",
    ]


def test_every_catalogue_entry_has_expected_output() -> None:
    names = {spec.name for spec in list_examples()}
    assert names == set(EXPECTED_OUTPUT) | {"singleton"}


def test_examples_write_to_stdout_by_default(capsys) -> None:
    get_example("factory").run(None, None)
    assert capsys.readouterr().out == "Drawing circle.\nDrawing square.\nDrawing rectangle.\n"


@pytest.mark.parametrize("script", sorted(p.name for p in EXAMPLES_DIR.glob("*_demo.py")))
def test_demo_scripts_run(script, capsys, monkeypatch) -> None:
    """Demo scripts import and run their main() cleanly."""
    monkeypatch.setattr("patterns_app.logging.configure_logging", lambda **kwargs: None)

    path = EXAMPLES_DIR / script
    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    module.main()

    assert capsys.readouterr().out
