"""Configuration validation utilities."""

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..models.currency import Currency

OR_MISSING_SIDE_POLICIES = ("keep", "zero")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_currency(value: Any) -> bool:
    try:
        Currency.parse(value)
    except ValueError:
        return False
    return True


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_valuation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate valuation parameters."""
        errors = []

        if "home_currency" in params:
            value = params["home_currency"]
            if not _is_currency(value):
                errors.append(ValidationError(
                    field="home_currency",
                    message="Must be a supported currency code",
                    value=value
                ))

        if "or_missing_side" in params:
            value = params["or_missing_side"]
            if value not in OR_MISSING_SIDE_POLICIES:
                errors.append(ValidationError(
                    field="or_missing_side",
                    message="Must be one of: keep, zero",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_interest_rate_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate interest-rate parameters."""
        errors = []

        if "fixed_rate" in params:
            value = params["fixed_rate"]
            if not _is_number(value) or value <= -1:
                errors.append(ValidationError(
                    field="fixed_rate",
                    message="Must be a number greater than -1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_fx_rates(rates: Any) -> list[ValidationError]:
        """Validate an FX table of pair code -> rate or {date: rate}."""
        if not isinstance(rates, dict):
            return [ValidationError(
                field="fx_rates",
                message="Must be a mapping of currency pair to rate",
                value=rates
            )]

        errors = []
        for pair, quote in rates.items():
            field_name = f"fx_rates.{pair}"

            if not isinstance(pair, str) or len(pair) != 6 or not (
                    _is_currency(pair[:3]) and _is_currency(pair[3:])):
                errors.append(ValidationError(
                    field=field_name,
                    message="Pair must be two supported currency codes, e.g. EURUSD",
                    value=pair
                ))
                continue

            fixings = quote if isinstance(quote, dict) else {None: quote}
            for fixing_date, rate in fixings.items():
                if fixing_date is not None and not isinstance(fixing_date, date):
                    errors.append(ValidationError(
                        field=field_name,
                        message="Fixing keys must be dates",
                        value=fixing_date
                    ))
                if not _is_number(rate) or rate <= 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Rate must be a positive number",
                        value=rate
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message="Must be a standard logging level name",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "valuation" in config:
            errors.extend(ConfigValidator.validate_valuation_params(config["valuation"]))

        if "interest_rate" in config:
            errors.extend(ConfigValidator.validate_interest_rate_params(config["interest_rate"]))

        if "market_data" in config:
            errors.extend(ConfigValidator.validate_fx_rates(
                config["market_data"].get("fx_rates", {})))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
