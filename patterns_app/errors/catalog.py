"""
Error classifications for pattern selection, catalogue lookup and output.
"""

from typing import Optional, Dict, Any


class PatternError(Exception):
    """Base class for catalogue errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class UnknownVariantError(PatternError):
    """A selector received a discriminator it has no variant for."""

    def __init__(self, message: str, discriminator: Optional[str] = None,
                 known: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.discriminator = discriminator
        self.known = known or []


class CatalogError(PatternError):
    """Requested example is not in the catalogue."""

    def __init__(self, message: str, example_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.example_name = example_name


class ConfigurationError(PatternError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class ConsoleError(PatternError):
    """An output sink could not be created or written."""

    def __init__(self, message: str, console_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.console_name = console_name
