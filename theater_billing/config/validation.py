"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates pricing configuration parameters."""

    @staticmethod
    def _non_negative_ints(section: str, params: dict[str, Any], names: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name not in params:
                continue
            value = params[name]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Must be a non-negative integer",
                    value=value
                ))
        return errors

    @staticmethod
    def _positive_int(section: str, params: dict[str, Any], name: str) -> list[ValidationError]:
        if name not in params:
            return []
        value = params[name]
        if not _is_int(value) or value <= 0:
            return [ValidationError(
                field=f"{section}.{name}",
                message="Must be a positive integer",
                value=value
            )]
        return []

    @staticmethod
    def validate_tragedy_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tragedy pricing parameters."""
        return ConfigValidator._non_negative_ints(
            "tragedy", params, ("base", "threshold", "over_rate")
        )

    @staticmethod
    def validate_comedy_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate comedy pricing parameters."""
        return ConfigValidator._non_negative_ints(
            "comedy", params, ("base", "threshold", "over_flat", "over_rate", "per_head")
        )

    @staticmethod
    def validate_credit_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volume credit parameters."""
        errors = ConfigValidator._non_negative_ints("credits", params, ("threshold",))
        # Used as a divisor
        errors.extend(ConfigValidator._positive_int("credits", params, "comedy_divisor"))
        return errors

    @staticmethod
    def validate_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display currency parameters."""
        errors = []

        if "symbol" in params and not isinstance(params["symbol"], str):
            errors.append(ValidationError(
                field="currency.symbol",
                message="Must be a string",
                value=params["symbol"]
            ))

        minor_errors = ConfigValidator._positive_int("currency", params, "minor_units")
        errors.extend(minor_errors)

        # Statements always show two decimals
        if "minor_units" in params and not minor_errors and 100 % params["minor_units"] != 0:
            errors.append(ValidationError(
                field="currency.minor_units",
                message="Must divide 100 evenly",
                value=params["minor_units"]
            ))
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("tragedy", ConfigValidator.validate_tragedy_params),
            ("comedy", ConfigValidator.validate_comedy_params),
            ("credits", ConfigValidator.validate_credit_params),
            ("currency", ConfigValidator.validate_currency_params),
        )
        for section, validate in sections:
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
