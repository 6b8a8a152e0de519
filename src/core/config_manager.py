"""
Configuration manager for the contact form application.

Reads settings from QSettings, falling back to DEFAULT_CONFIG and coercing
stored values to the type of their default.
"""

import logging
from typing import Any

from PySide6.QtCore import QSettings

from .config import DEFAULT_CONFIG, LOG_LEVELS, setup_qsettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """QSettings-backed configuration with typed defaults."""

    def __init__(self) -> None:
        setup_qsettings()
        self._settings = QSettings()

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            The stored value coerced to the type of its default, or the
            default itself when the stored value cannot be coerced
        """
        fallback = default if default is not None else DEFAULT_CONFIG.get(key)
        value = self._settings.value(key, fallback)
        if fallback is None:
            return value

        expected_type = type(fallback)
        try:
            if expected_type is bool:
                # Some QSettings backends store booleans as strings
                return value.lower() in ("true", "1", "yes", "on") if isinstance(value, str) else bool(value)
            return expected_type(value)
        except (ValueError, TypeError) as e:
            logger.warning(f"Failed to coerce config key '{key}': {e}, using default")
            return fallback

    def get_log_level(self) -> str:
        """Return the configured log level, falling back to the default if unknown."""
        level = str(self.get("log_level")).upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown log level '{level}', using {DEFAULT_CONFIG['log_level']}")
            return str(DEFAULT_CONFIG["log_level"])
        return level
