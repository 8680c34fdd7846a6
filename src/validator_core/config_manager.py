"""
QSettings-backed configuration for the field validator demo.

Stored rule and mode names are resolved to enum members; names that no
longer resolve are reported through the ErrorHandler and replaced by the
defaults so a stale settings file never breaks startup.
"""

import logging
from typing import Any

from PySide6.QtCore import QSettings

from .config import DEFAULT_CONFIG, LOG_LEVELS, setup_qsettings
from .error_handler import get_error_handler
from .errors import ConfigError
from .rules import ValidationMode, ValidationRule

logger = logging.getLogger(__name__)


class ConfigManager:
    """Type-safe access to settings with fallback to DEFAULT_CONFIG."""

    def __init__(self) -> None:
        setup_qsettings()
        self._settings = QSettings()
        self._defaults = DEFAULT_CONFIG.copy()

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value with fallback to defaults.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            Stored value coerced to the default's type, or the default
        """
        fallback = default if default is not None else self._defaults.get(key)
        value = self._settings.value(key, fallback)

        if fallback is not None and not isinstance(value, type(fallback)):
            try:
                value = type(fallback)(value)
            except (ValueError, TypeError) as e:
                logger.warning(f"Failed to coerce config key '{key}': {e}, using default")
                value = fallback

        return value

    def get_rule(self, key: str) -> ValidationRule:
        """
        Get a stored validation rule.

        Args:
            key: Configuration key holding a rule name

        Returns:
            The stored rule, or the default rule if the stored name is unknown
        """
        try:
            return ValidationRule.parse(self.get(key))
        except ConfigError as e:
            e.context["key"] = key
            get_error_handler().handle(e)
            return ValidationRule.parse(self._defaults[key])

    def get_mode(self, key: str) -> ValidationMode:
        """Get a stored validation mode (see get_rule)."""
        try:
            return ValidationMode.parse(self.get(key))
        except ConfigError as e:
            e.context["key"] = key
            get_error_handler().handle(e)
            return ValidationMode.parse(self._defaults[key])

    def get_log_level(self) -> int:
        """Get the configured log level as a logging constant."""
        level = str(self.get("log_level")).upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown log level '{level}', using {DEFAULT_CONFIG['log_level']}")
            level = DEFAULT_CONFIG["log_level"]
        return int(getattr(logging, level))

