"""Default configuration parameters for the pattern catalogue."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingParams:
    """structlog settings applied before examples run."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class ConsoleParams:
    """Where example output lines are written."""
    method: str = "stdout"                  # stdout, file, memory
    output_path: Optional[str] = None       # required when method is file
    format: str = "text"                    # text, jsonl (file only)
    append_mode: bool = True
    create_dirs: bool = True


@dataclass(frozen=True)
class FactoryParams:
    """Shape factory behaviour for unrecognised discriminators."""
    strict: bool = False                    # raise instead of falling back
    default_shape: str = "Circle"


@dataclass(frozen=True)
class PaymentParams:
    """Payment adapter selection."""
    gateway: str = "legacy"                 # legacy, modern


@dataclass(frozen=True)
class RunnerParams:
    """Example runner behaviour."""
    stop_on_error: bool = False


@dataclass(frozen=True)
class CatalogConfig:
    """Complete default configuration."""
    logging: LoggingParams
    console: ConsoleParams
    factory: FactoryParams
    payment: PaymentParams
    runner: RunnerParams


def get_default_config() -> CatalogConfig:
    """Get the default configuration instance."""
    return CatalogConfig(
        logging=LoggingParams(),
        console=ConsoleParams(),
        factory=FactoryParams(),
        payment=PaymentParams(),
        runner=RunnerParams(),
    )
