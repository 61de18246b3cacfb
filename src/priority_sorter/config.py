"""Configuration for the priority sorter.

Usage:
    from priority_sorter.config import Config

    # Access config values
    database_url = Config.DATABASE_URL
    boost_config = Config.boost_config()
"""

import os

from .schemas import BoostConfig


class Config:
    """Centralized configuration for the priority sorter.

    All configuration values are class variables that can be accessed directly.
    Values are loaded from environment variables with sensible defaults.

    Example:
        from priority_sorter.config import Config

        print(Config.NUMBER_OF_PRIORITIES)
        print(Config.boost_config())
    """

    # ========================================================================
    # Helper methods (static)
    # ========================================================================

    @staticmethod
    def _get_value(key: str, default: str) -> str:
        """Get configuration value from environment with optional default."""
        return os.getenv(key, default)

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer configuration value.

        Raises:
            ValueError: If the variable is set but not a whole number
        """
        return int(os.getenv(key, str(default)))

    @staticmethod
    def _get_bool(key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        return os.getenv(key, str(default)).lower() in ("true", "1", "yes")

    # ========================================================================
    # Database Configuration
    # ========================================================================

    PRIORITY_SORTER_DIR: str = _get_value("PRIORITY_SORTER_DIR", os.getcwd())
    DATABASE_URL: str = _get_value(
        "PRIORITY_SORTER_DATABASE_URL", f"sqlite:///{PRIORITY_SORTER_DIR}/priority_sorter.db"
    )

    # ========================================================================
    # Sorter Configuration
    # ========================================================================

    NUMBER_OF_PRIORITIES: int = _get_int("NUMBER_OF_PRIORITIES", 5)
    DEFAULT_PRIORITY: int = _get_int("DEFAULT_PRIORITY", 3)
    ALLOW_PRIORITY_ON_JOBS: bool = _get_bool("ALLOW_PRIORITY_ON_JOBS", True)

    # Boosts
    DURATION_BOOST_ENABLED: bool = _get_bool("DURATION_BOOST_ENABLED", False)
    SLOW_BUILD_THRESHOLD_MS: int = _get_int("SLOW_BUILD_THRESHOLD_MS", 10 * 60 * 1000)
    MIN_BUILDS_FOR_AVERAGE: int = _get_int("MIN_BUILDS_FOR_AVERAGE", 3)
    HEALTH_BOOST_ENABLED: bool = _get_bool("HEALTH_BOOST_ENABLED", False)
    HEALTH_BOOST_POSITIVE: bool = _get_bool("HEALTH_BOOST_POSITIVE", True)

    LOG_LEVEL: str = _get_value("LOG_LEVEL", "INFO")

    # ========================================================================
    # MQTT Configuration
    # ========================================================================

    BROADCAST_TYPE: str = _get_value("BROADCAST_TYPE", "none")
    MQTT_BROKER: str = _get_value("MQTT_BROKER", "localhost")
    MQTT_PORT: int = _get_int("MQTT_PORT", 1883)
    MQTT_TOPIC: str = _get_value("MQTT_TOPIC", "priority-sorter/events")

    @classmethod
    def boost_config(cls, **overrides: object) -> BoostConfig:
        """Build a validated configuration snapshot from the current values.

        Args:
            **overrides: Field values replacing the configured ones

        Returns:
            Frozen BoostConfig

        Raises:
            pydantic.ValidationError: If a value is out of range (e.g. bucket count <= 0)
        """
        values: dict[str, object] = {
            "number_of_priorities": cls.NUMBER_OF_PRIORITIES,
            "default_priority": cls.DEFAULT_PRIORITY,
            "slow_build_threshold_ms": cls.SLOW_BUILD_THRESHOLD_MS,
            "min_builds_for_average": cls.MIN_BUILDS_FOR_AVERAGE,
            "duration_boost_enabled": cls.DURATION_BOOST_ENABLED,
            "health_boost_enabled": cls.HEALTH_BOOST_ENABLED,
            "health_boost_positive": cls.HEALTH_BOOST_POSITIVE,
            "allow_priority_on_jobs": cls.ALLOW_PRIORITY_ON_JOBS,
        }
        values.update(overrides)
        return BoostConfig.model_validate(values)
