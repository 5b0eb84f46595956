"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
CONSOLE_METHODS = ("stdout", "file", "memory")
CONSOLE_FORMATS = ("text", "jsonl")
PAYMENT_GATEWAYS = ("legacy", "modern")
SECTIONS = ("logging", "console", "factory", "payment", "runner")
# Only valid under "defaults"; applied once per process
PROCESS_WIDE_SECTIONS = ("logging", "runner")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_console_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate console parameters."""
        errors = []

        method = params.get("method", "stdout")
        if method not in CONSOLE_METHODS:
            errors.append(ValidationError(
                field="console.method",
                message=f"Must be one of {', '.join(CONSOLE_METHODS)}",
                value=method
            ))

        if method == "file" and not params.get("output_path"):
            errors.append(ValidationError(
                field="console.output_path",
                message="Required when console.method is file",
                value=params.get("output_path")
            ))

        if "format" in params and params["format"] not in CONSOLE_FORMATS:
            errors.append(ValidationError(
                field="console.format",
                message=f"Must be one of {', '.join(CONSOLE_FORMATS)}",
                value=params["format"]
            ))

        return errors

    @staticmethod
    def validate_factory_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shape factory parameters."""
        errors = []

        if "strict" in params and not isinstance(params["strict"], bool):
            errors.append(ValidationError(
                field="factory.strict",
                message="Must be a boolean",
                value=params["strict"]
            ))

        if "default_shape" in params:
            value = params["default_shape"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="factory.default_shape",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_payment_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate payment adapter parameters."""
        errors = []

        if "gateway" in params and params["gateway"] not in PAYMENT_GATEWAYS:
            errors.append(ValidationError(
                field="payment.gateway",
                message=f"Must be one of {', '.join(PAYMENT_GATEWAYS)}",
                value=params["gateway"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in SECTIONS:
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
        if errors:
            return errors

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "console" in config:
            errors.extend(ConfigValidator.validate_console_params(config["console"]))

        if "factory" in config:
            errors.extend(ConfigValidator.validate_factory_params(config["factory"]))

        if "payment" in config:
            errors.extend(ConfigValidator.validate_payment_params(config["payment"]))

        if "runner" in config:
            value = config["runner"].get("stop_on_error", False)
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="runner.stop_on_error",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_catalog_document(document: Any) -> list[ValidationError]:
        """Validate the shape of a parsed catalog.yaml before merging."""
        if not isinstance(document, dict):
            return [ValidationError(
                field="catalog",
                message="Must be a mapping",
                value=document
            )]

        errors = []

        for key in ("defaults", "examples"):
            value = document.get(key)
            if value is not None and not isinstance(value, dict):
                errors.append(ValidationError(
                    field=key,
                    message="Must be a mapping",
                    value=value
                ))

        examples = document.get("examples")
        if isinstance(examples, dict):
            for name, section in examples.items():
                if section is None:
                    continue
                if not isinstance(section, dict):
                    errors.append(ValidationError(
                        field=f"examples.{name}",
                        message="Must be a mapping",
                        value=section
                    ))
                    continue
                for key in PROCESS_WIDE_SECTIONS:
                    if key in section:
                        errors.append(ValidationError(
                            field=f"examples.{name}.{key}",
                            message="Only allowed under defaults",
                            value=section[key]
                        ))

        return errors
