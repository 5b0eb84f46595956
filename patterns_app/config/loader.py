"""Configuration loader with layered parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CatalogConfig,
    ConsoleParams,
    FactoryParams,
    LoggingParams,
    PaymentParams,
    RunnerParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTION_TYPES = {
    "logging": LoggingParams,
    "console": ConsoleParams,
    "factory": FactoryParams,
    "payment": PaymentParams,
    "runner": RunnerParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_dir: Path
    defaults: CatalogConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_catalog_file(self) -> dict[str, Any]:
        """
        Load config/catalog.yaml, or an empty mapping if it is absent.

        Raises:
            ConfigurationError: If the document is not laid out as
                ``defaults`` and ``examples`` mappings
        """
        catalog_file = self.config_dir / "catalog.yaml"

        if not catalog_file.exists():
            return {}

        with open(catalog_file) as f:
            catalog_config = yaml.safe_load(f)

        if catalog_config is None:
            return {}

        errors = ConfigValidator.validate_catalog_document(catalog_config)
        if errors:
            raise ConfigurationError(
                f"Invalid catalog file {catalog_file}: {len(errors)} error(s)",
                errors=errors,
            )

        return catalog_config

    def merge_config(
        self,
        example_name: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with layered precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Per-example section of catalog.yaml
        3. Global ``defaults`` section of catalog.yaml
        4. Dataclass defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        file_config = self.load_catalog_file()
        config = self._deep_merge(config, file_config.get("defaults") or {})

        if example_name:
            example_config = (file_config.get("examples") or {}).get(example_name) or {}
            config = self._deep_merge(config, example_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        example_name: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> CatalogConfig:
        """Merge, validate and convert configuration to typed params."""
        merged = self.merge_config(example_name, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)",
                errors=errors,
                context={"example": example_name},
            )

        return self._dict_to_config(merged)

    def _dict_to_config(self, config: dict[str, Any]) -> CatalogConfig:
        """Convert a merged mapping back into frozen dataclasses."""
        sections = {}
        for name, params_cls in _SECTION_TYPES.items():
            known = {f.name for f in fields(params_cls)}
            values = {k: v for k, v in (config.get(name) or {}).items() if k in known}
            sections[name] = params_cls(**values)
        return CatalogConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
