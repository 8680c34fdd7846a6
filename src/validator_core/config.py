"""
Configuration defaults for the field validator demo.

Holds the application identifiers used by QSettings and QStandardPaths and
the default rule and mode for each demo field.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings
APP_ORGANIZATION = "FieldValidator"
APP_NAME = "Demo"

DEFAULT_CONFIG: dict[str, Any] = {
    # Field rules, stored by rule name
    "email_rule": "email",
    "phone_rule": "phone_number",
    # Field modes: "on_change" or "on_demand"
    "email_mode": "on_change",
    "phone_mode": "on_demand",
    # Logging
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_app_data_dir() -> Path:
    """
    Get the writable data directory for this application.

    Falls back to the config location when no app data location is available.
    """
    app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if app_data_location:
        return Path(app_data_location)

    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    Call early in application startup so QSettings uses the right
    organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
