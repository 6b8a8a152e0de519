"""
Configuration defaults for the contact form application.

This module provides the application identifiers used by QSettings and the
default value for every supported configuration key.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings
APP_ORGANIZATION = "ContactForm"
APP_NAME = "Validator"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Default configuration with all supported keys and JSON-serializable types
DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    # Keystroke filters
    "mobile_digits_only": True,
    "first_name_uppercase_only": False,
    # Submission behaviour
    "clear_on_success": True,
    "show_thank_you": True,
    "thank_you_message": "Thank you for contacting me. I will get back to you soon.",
}


def get_app_config_dir() -> Path:
    """
    Get the application configuration directory using QStandardPaths.

    Returns:
        Path to the writable configuration directory for this application
    """
    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
