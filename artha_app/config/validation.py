"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_projection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate projection parameters."""
        errors = []

        # Validate compounding_frequency
        if "compounding_frequency" in params:
            value = params["compounding_frequency"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="compounding_frequency",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate risk_adjustment_step
        if "risk_adjustment_step" in params:
            value = params["risk_adjustment_step"]
            if not _is_number(value) or value < 0 or value >= 0.1:
                errors.append(ValidationError(
                    field="risk_adjustment_step",
                    message="Must be a non-negative number below 0.1",
                    value=value
                ))

        # Validate max_horizon_years
        if "max_horizon_years" in params:
            value = params["max_horizon_years"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="max_horizon_years",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_fallback_rates(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fallback nominal rates."""
        errors = []

        for name, value in params.items():
            if not _is_number(value) or value < 0 or value > 100:
                errors.append(ValidationError(
                    field=f"fallback_rates.{name}",
                    message="Must be a percentage between 0 and 100",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_market_data_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate market data retrieval parameters."""
        errors = []

        # Validate timeout_seconds
        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate lookback_points
        if "lookback_points" in params:
            value = params["lookback_points"]
            if not _is_int(value) or value < 2:
                errors.append(ValidationError(
                    field="lookback_points",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        # Validate trading_days
        if "trading_days" in params:
            value = params["trading_days"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="trading_days",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate blend weights
        for key in ("hybrid_equity_weight", "nps_equity_weight"):
            if key in params:
                value = params[key]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=key,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_cache_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate cache parameters."""
        errors = []

        if "ttl_seconds" in params:
            value = params["ttl_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="ttl_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_summary_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate narrative generation parameters."""
        errors = []

        if "models" in params:
            value = params["models"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(isinstance(m, str) and m for m in value)):
                errors.append(ValidationError(
                    field="models",
                    message="Must be a non-empty list of model names",
                    value=value
                ))

        if "max_words" in params:
            value = params["max_words"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="max_words",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_instrument_overrides(instrument_id: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate catalog overrides for one instrument."""
        errors = []

        for key in ("risk_level", "liquidity_level"):
            if key in params:
                value = params[key]
                if not _is_int(value) or value < 1 or value > 10:
                    errors.append(ValidationError(
                        field=f"{instrument_id}.{key}",
                        message="Must be an integer between 1 and 10",
                        value=value
                    ))

        for key in ("tax_note", "display_name"):
            if key in params and not isinstance(params[key], str):
                errors.append(ValidationError(
                    field=f"{instrument_id}.{key}",
                    message="Must be a string",
                    value=params[key]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "projection" in config:
            errors.extend(ConfigValidator.validate_projection_params(config["projection"]))

        if "fallback_rates" in config:
            errors.extend(ConfigValidator.validate_fallback_rates(config["fallback_rates"]))

        if "market_data" in config:
            errors.extend(ConfigValidator.validate_market_data_params(config["market_data"]))

        if "cache" in config:
            errors.extend(ConfigValidator.validate_cache_params(config["cache"]))

        if "summary" in config:
            errors.extend(ConfigValidator.validate_summary_params(config["summary"]))

        return errors
