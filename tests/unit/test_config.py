"""Unit tests for configuration management."""

from datetime import date
from pathlib import Path

import pytest

from composing_contracts.config.defaults import get_default_config
from composing_contracts.config.loader import ConfigLoader
from composing_contracts.config.validation import ConfigValidator
from composing_contracts.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config is not None
        assert config.valuation.home_currency == "USD"
        assert config.valuation.or_missing_side == "keep"
        assert config.interest_rate.fixed_rate == 0.0
        assert config.market_data.fx_rates == {}
        assert config.logging.level == "INFO"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert loader is not None
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with no file and no overrides."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["valuation"]["home_currency"] == "USD"
        assert config["market_data"]["fx_rates"] == {}

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test config merging with call-site overrides."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config({"valuation": {"home_currency": "EUR"}})

        assert config["valuation"]["home_currency"] == "EUR"
        # Other defaults should remain
        assert config["valuation"]["or_missing_side"] == "keep"

    def test_file_config_precedence(self, tmp_path: Path) -> None:
        """Test that overrides beat the YAML file, which beats defaults."""
        (tmp_path / "valuation.yaml").write_text(
            "valuation:\n"
            "  home_currency: GBP\n"
            "  or_missing_side: zero\n"
            "interest_rate:\n"
            "  fixed_rate: 0.03\n"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"valuation": {"home_currency": "EUR"}})

        assert config["valuation"]["home_currency"] == "EUR"
        assert config["valuation"]["or_missing_side"] == "zero"
        assert config["interest_rate"]["fixed_rate"] == 0.03

    def test_load_config_builds_dataclasses(self, tmp_path: Path) -> None:
        """Test that YAML fx tables, including dated fixings, are loaded."""
        (tmp_path / "valuation.yaml").write_text(
            "market_data:\n"
            "  fx_rates:\n"
            "    EURUSD: 1.1\n"
            "    GBPUSD:\n"
            "      2030-01-01: 1.25\n"
        )
        config = ConfigLoader.create(tmp_path).load_config()

        assert config.market_data.fx_rates["EURUSD"] == 1.1
        assert config.market_data.fx_rates["GBPUSD"] == {date(2030, 1, 1): 1.25}

    def test_load_config_rejects_invalid_values(self, tmp_path: Path) -> None:
        """Test that validation failures surface as ConfigurationError."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_config({"valuation": {"home_currency": "XYZ"}})

        assert exc_info.value.errors[0].field == "home_currency"

    def test_load_config_rejects_unknown_keys(self, tmp_path: Path) -> None:
        """Test that unknown keys inside a section are rejected."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load_config({"valuation": {"home_ccy": "USD"}})

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        """Test that an empty config file behaves like a missing one."""
        (tmp_path / "valuation.yaml").write_text("")
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_file_config() == {}

    def test_non_mapping_yaml_file(self, tmp_path: Path) -> None:
        """Test that a top-level list in the config file is rejected."""
        (tmp_path / "valuation.yaml").write_text("- a\n- b\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load_file_config()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_valuation_params(self) -> None:
        params = {"home_currency": "eur", "or_missing_side": "zero"}

        errors = ConfigValidator.validate_valuation_params(params)
        assert len(errors) == 0

    def test_invalid_or_missing_side(self) -> None:
        params = {"or_missing_side": "ignore"}

        errors = ConfigValidator.validate_valuation_params(params)
        assert len(errors) == 1
        assert errors[0].field == "or_missing_side"
        assert "keep, zero" in errors[0].message

    def test_invalid_fixed_rate(self) -> None:
        errors = ConfigValidator.validate_interest_rate_params({"fixed_rate": "high"})
        assert len(errors) == 1
        assert errors[0].field == "fixed_rate"

        errors = ConfigValidator.validate_interest_rate_params({"fixed_rate": -1.5})
        assert len(errors) == 1

    def test_invalid_fx_pair(self) -> None:
        errors = ConfigValidator.validate_fx_rates({"EURXYZ": 1.1})
        assert len(errors) == 1
        assert errors[0].field == "fx_rates.EURXYZ"

    def test_invalid_fx_rate(self) -> None:
        errors = ConfigValidator.validate_fx_rates({"EURUSD": -1.0})
        assert len(errors) == 1
        assert "positive" in errors[0].message

    def test_invalid_fixing_key(self) -> None:
        errors = ConfigValidator.validate_fx_rates({"EURUSD": {"tomorrow": 1.1}})
        assert len(errors) == 1
        assert errors[0].message == "Fixing keys must be dates"

    def test_fx_rates_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_fx_rates(["EURUSD"])
        assert len(errors) == 1
        assert errors[0].field == "fx_rates"

    def test_invalid_logging_params(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert [err.field for err in errors] == ["level", "format_json"]

    def test_multiple_validation_errors(self) -> None:
        """Test validation across sections of a complete config."""
        config = {
            "valuation": {"home_currency": "XYZ", "or_missing_side": "never"},
            "interest_rate": {"fixed_rate": True},
            "market_data": {"fx_rates": {"EURUSD": 0}},
        }

        errors = ConfigValidator.validate_config(config)
        error_fields = [err.field for err in errors]
        assert error_fields == [
            "home_currency",
            "or_missing_side",
            "fixed_rate",
            "fx_rates.EURUSD",
        ]
