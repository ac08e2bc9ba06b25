"""
Configuration management for DynamicType.

This module provides a ConfigManager for loading, validating, and saving the
typography settings (preferred size category, font family, logging level) to a
JSON file. Invalid values are reset to defaults with a warning, corrupt files
are backed up, and writes are atomic.
"""

import json
import logging
import logging.handlers
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .helpers import get_app_data_path
from dynamictype import constants
from dynamictype.core.size_category import SizeCategory


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading, saving, and validation of DynamicType's configuration.
    """
    _logging_lock: threading.Lock = threading.Lock()

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initializes the ConfigManager.

        Args:
            config_path: Explicit file location. Defaults to the config file in
                         the per-user app data directory.
        """
        self.config_path = Path(config_path or get_app_data_path() / constants.config.defaults.CONFIG_FILENAME)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.Config")
        self._last_config: Optional[Dict[str, Any]] = None

    @classmethod
    def get_log_file_path(cls) -> Path:
        """Returns the absolute path to the log file."""
        return get_app_data_path() / constants.logs.LOG_FILENAME

    @classmethod
    def setup_logging(cls, log_level: str = constants.config.defaults.DEFAULT_LOG_LEVEL) -> logging.Logger:
        """
        Initializes logging with handlers for both a rotating file and the console.

        Safe to call more than once; later calls only adjust the level.
        """
        logger = logging.getLogger(constants.app.APP_NAME)
        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            level = constants.logs.CONSOLE_LOG_LEVEL

        with cls._logging_lock:
            logger.setLevel(level)
            if logger.handlers:
                for handler in logger.handlers:
                    handler.setLevel(level)
                return logger

            try:
                file_handler = logging.handlers.RotatingFileHandler(
                    cls.get_log_file_path(),
                    maxBytes=constants.logs.MAX_LOG_SIZE,
                    backupCount=constants.logs.LOG_BACKUP_COUNT,
                    encoding='utf-8',
                    delay=True
                )
                file_handler.setLevel(level)
                file_handler.setFormatter(logging.Formatter(
                    constants.logs.LOG_FORMAT,
                    datefmt=constants.logs.LOG_DATE_FORMAT
                ))
                logger.addHandler(file_handler)
            except OSError as e:
                logging.basicConfig(level=logging.ERROR)
                logging.error("Failed to initialize file logging, falling back to console only: %s", e)

            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(constants.logs.CONSOLE_LOG_FORMAT))
            logger.addHandler(console_handler)

        logger.info("Logging initialized at level %s.", logging.getLevelName(level))
        return logger

    def _validate_boolean(self, key: str, value: Any, default: bool) -> bool:
        """Validates a value is a boolean."""
        if isinstance(value, bool):
            return value
        self.logger.warning(constants.config.messages.INVALID_BOOLEAN.format(key=key, value=value, default=default))
        return default

    def _validate_string(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a non-empty string."""
        if isinstance(value, str) and value.strip():
            return value.strip()
        self.logger.warning(constants.config.messages.INVALID_STRING.format(key=key, value=value, default=default))
        return default

    def _validate_choice(self, key: str, value: Any, default: str, choices: List[str]) -> str:
        """Validates a value is one of the allowed choices (case-insensitive)."""
        if isinstance(value, str):
            for choice in choices:
                if choice.lower() == value.lower():
                    return choice
        self.logger.warning(constants.config.messages.INVALID_CHOICE.format(key=key, value=value, default=default, choices=choices))
        return default

    def _validate_size_category(self, key: str, value: Any, default: str) -> str:
        """
        Validates a value names a canonical size category.

        Strings are kept as written; SizeCategory members are stored as their
        platform raw value so the result is always JSON-serializable.
        """
        category = SizeCategory.from_value(value)
        if category is not SizeCategory.UNSPECIFIED:
            return value.strip() if isinstance(value, str) else category.value
        self.logger.warning(constants.config.messages.INVALID_SIZE_CATEGORY.format(key=key, value=value, default=default))
        return default

    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        default_ref = constants.config.defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        validated["size_category"] = self._validate_size_category("size_category", validated.get("size_category"), default_ref["size_category"])
        validated["font_family"] = self._validate_string("font_family", validated.get("font_family"), default_ref["font_family"])
        validated["follow_application_font"] = self._validate_boolean("follow_application_font", validated.get("follow_application_font"), default_ref["follow_application_font"])
        validated["log_level"] = self._validate_choice("log_level", validated.get("log_level"), default_ref["log_level"], constants.logs.LEVEL_NAMES)

        return {key: validated[key] for key in default_ref}

    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            try:
                corrupt_path = self.config_path.with_name(f"{self.config_path.name}.corrupt")
                shutil.move(self.config_path, corrupt_path)
            except OSError:
                self.logger.exception("Failed to back up corrupt config file.")
            return self.reset_to_defaults()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file does not contain a JSON object. Using defaults.")
            return self.reset_to_defaults()

        validated_config = self._validate_config(config)
        self._last_config = validated_config.copy()
        return validated_config

    def save(self, config: Dict[str, Any]) -> None:
        """Atomically saves the provided configuration to the file."""
        validated_config = self._validate_config(config)

        if self._last_config == validated_config:
            self.logger.debug("Skipping save, configuration is unchanged.")
            return

        temp_path: Optional[str] = None
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=self.config_path.parent, encoding="utf-8"
            ) as temp_f:
                temp_path = temp_f.name
                json.dump(validated_config, temp_f, indent=4)
            shutil.move(temp_path, self.config_path)
            temp_path = None
            self._last_config = validated_config.copy()
            self.logger.debug("Configuration saved successfully to %s", self.config_path)
        except (OSError, TypeError, ValueError) as e:
            msg = f"Failed to save configuration to {self.config_path}: {e}"
            self.logger.error(msg)
            raise ConfigError(msg) from e
        finally:
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)

    def reset_to_defaults(self) -> Dict[str, Any]:
        """Resets the configuration to factory defaults and saves it."""
        self.logger.info("Resetting configuration to default values.")
        defaults = constants.config.defaults.DEFAULT_CONFIG.copy()
        self.save(defaults)
        return defaults
