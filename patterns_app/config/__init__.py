"""Configuration defaults, loading and validation."""

from .defaults import (
    CatalogConfig,
    ConsoleParams,
    FactoryParams,
    LoggingParams,
    PaymentParams,
    RunnerParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "CatalogConfig",
    "ConsoleParams",
    "FactoryParams",
    "LoggingParams",
    "PaymentParams",
    "RunnerParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
