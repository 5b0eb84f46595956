"""Rendering helpers for example output lines."""

from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Render a number the way the examples print it.

    Integral floats lose their trailing ``.0`` (``81.0`` -> ``"81"``) so
    that a discounted total reads like a price rather than a float repr.

    Args:
        value: Integer or float to render

    Returns:
        String form of the number
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
