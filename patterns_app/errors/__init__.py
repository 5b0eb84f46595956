"""
Exception hierarchy for the pattern catalogue.

The pattern classes themselves validate almost nothing; these errors are
raised by the selectors, the catalogue, the console sinks and the
configuration layer.
"""

from .catalog import (
    PatternError,
    UnknownVariantError,
    CatalogError,
    ConfigurationError,
    ConsoleError,
)

__all__ = [
    "PatternError",
    "UnknownVariantError",
    "CatalogError",
    "ConfigurationError",
    "ConsoleError",
]
