"""
Constants for configuration defaults and validation messages.
"""
from typing import Final, Dict, Any

from .fonts import fonts
from .logs import logs

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_STRING: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_BOOLEAN: Final[str] = "Invalid {key} '{value}', resetting to boolean default '{default}'"
    INVALID_CHOICE: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'. Valid choices: {choices}"
    INVALID_SIZE_CATEGORY: Final[str] = "Unrecognized size_category '{value}', resetting to default '{default}'"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all settings."""
    DEFAULT_SIZE_CATEGORY: Final[str] = "large"
    DEFAULT_FONT_FAMILY: Final[str] = fonts.DEFAULT_FONT
    DEFAULT_FOLLOW_APPLICATION_FONT: Final[bool] = False
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"

    CONFIG_FILENAME: Final[str] = "DynamicType_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "size_category": DEFAULT_SIZE_CATEGORY,
        "font_family": DEFAULT_FONT_FAMILY,
        "follow_application_font": DEFAULT_FOLLOW_APPLICATION_FONT,
        "log_level": DEFAULT_LOG_LEVEL,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")
        if self.DEFAULT_LOG_LEVEL not in logs.LEVEL_NAMES:
            raise ValueError(f"DEFAULT_LOG_LEVEL must be one of {logs.LEVEL_NAMES}")

        actual_keys = set(self.DEFAULT_CONFIG.keys())
        expected_keys = {"size_category", "font_family", "follow_application_font", "log_level"}
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
