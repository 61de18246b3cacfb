"""Unit tests for Config class."""

import os

import pytest
from pydantic import ValidationError

from priority_sorter import BoostConfig, Config


class TestConfig:
    """Test suite for Config class."""

    def test_config_has_required_attributes(self):
        """Test that Config class has all required configuration attributes."""
        assert hasattr(Config, "DATABASE_URL")

        # Sorter configuration
        assert hasattr(Config, "NUMBER_OF_PRIORITIES")
        assert hasattr(Config, "DEFAULT_PRIORITY")
        assert hasattr(Config, "ALLOW_PRIORITY_ON_JOBS")
        assert hasattr(Config, "DURATION_BOOST_ENABLED")
        assert hasattr(Config, "SLOW_BUILD_THRESHOLD_MS")
        assert hasattr(Config, "MIN_BUILDS_FOR_AVERAGE")
        assert hasattr(Config, "HEALTH_BOOST_ENABLED")
        assert hasattr(Config, "HEALTH_BOOST_POSITIVE")
        assert hasattr(Config, "LOG_LEVEL")

        # MQTT configuration
        assert hasattr(Config, "BROADCAST_TYPE")
        assert hasattr(Config, "MQTT_BROKER")
        assert hasattr(Config, "MQTT_PORT")
        assert hasattr(Config, "MQTT_TOPIC")

    def test_config_values_types(self):
        assert isinstance(Config.NUMBER_OF_PRIORITIES, int)
        assert isinstance(Config.SLOW_BUILD_THRESHOLD_MS, int)
        assert isinstance(Config.HEALTH_BOOST_POSITIVE, bool)
        assert isinstance(Config.MQTT_PORT, int)

    def test_database_url_format(self):
        assert Config.DATABASE_URL.startswith("sqlite:///") or os.getenv(
            "PRIORITY_SORTER_DATABASE_URL"
        )

    def test_sorter_defaults(self):
        assert Config.NUMBER_OF_PRIORITIES == 5 or os.getenv("NUMBER_OF_PRIORITIES")
        assert Config.DEFAULT_PRIORITY == 3 or os.getenv("DEFAULT_PRIORITY")
        assert Config.MIN_BUILDS_FOR_AVERAGE == 3 or os.getenv("MIN_BUILDS_FOR_AVERAGE")

    def test_get_int_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PRIORITY_SORTER_TEST_INT", "12")
        assert Config._get_int("PRIORITY_SORTER_TEST_INT", 5) == 12

    def test_get_int_rejects_non_numeric(self, monkeypatch: pytest.MonkeyPatch):
        """Test that non-numeric input is rejected at the configuration boundary."""
        monkeypatch.setenv("PRIORITY_SORTER_TEST_INT", "many")
        with pytest.raises(ValueError):
            Config._get_int("PRIORITY_SORTER_TEST_INT", 5)

    @pytest.mark.parametrize(("value", "expected"), [("true", True), ("1", True), ("YES", True), ("no", False)])
    def test_get_bool(self, monkeypatch: pytest.MonkeyPatch, value, expected):
        monkeypatch.setenv("PRIORITY_SORTER_TEST_BOOL", value)
        assert Config._get_bool("PRIORITY_SORTER_TEST_BOOL") is expected


class TestBoostConfig:
    """Test suite for the BoostConfig snapshot."""

    def test_boost_config_from_config(self):
        config = Config.boost_config()
        assert isinstance(config, BoostConfig)
        assert config.number_of_priorities == Config.NUMBER_OF_PRIORITIES
        assert config.slow_build_threshold_ms == Config.SLOW_BUILD_THRESHOLD_MS

    def test_overrides(self):
        config = Config.boost_config(number_of_priorities=12, health_boost_enabled=True)
        assert config.number_of_priorities == 12
        assert config.health_boost_enabled is True

    @pytest.mark.parametrize("buckets", [0, -3, "lots"])
    def test_invalid_bucket_count_rejected(self, buckets):
        with pytest.raises(ValidationError):
            Config.boost_config(number_of_priorities=buckets)

    def test_snapshot_is_frozen(self):
        config = BoostConfig()
        with pytest.raises(ValidationError):
            config.number_of_priorities = 7

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValidationError):
            BoostConfig(slow_build_threshold_ms=0)
