"""
Unit tests for the ConfigManager class.
"""
import json
import logging
import pytest
from unittest.mock import patch, mock_open
from pathlib import Path

from dynamictype import constants
from dynamictype.core.size_category import SizeCategory
from dynamictype.utils.config import ConfigError, ConfigManager


@pytest.fixture
def config_manager(tmp_path):
    config_path = tmp_path / "dynamictype_test.json"
    return ConfigManager(config_path)


def test_load_creates_default_config_if_missing(config_manager):
    with patch.object(Path, "exists", return_value=False):
        with patch.object(config_manager, "save") as mock_save:
            config = config_manager.load()
            mock_save.assert_called_once()
            assert mock_save.call_args[0][0] == constants.config.defaults.DEFAULT_CONFIG
            assert config == constants.config.defaults.DEFAULT_CONFIG


def test_load_valid_config_merges_with_defaults(config_manager):
    mock_content = json.dumps({"size_category": "accessibilityLarge", "log_level": "debug"})
    with patch.object(Path, "exists", return_value=True):
        with patch.object(Path, "open", mock_open(read_data=mock_content)):
            config = config_manager.load()
    assert config["size_category"] == "accessibilityLarge"
    assert config["log_level"] == "DEBUG"
    assert config["font_family"] == constants.config.defaults.DEFAULT_FONT_FAMILY


def test_validate_config_corrects_invalid_values(config_manager):
    invalid_config = {
        "size_category": "gigantic",
        "font_family": "   ",
        "follow_application_font": "yes",
        "log_level": "LOUD",
    }
    with patch.object(config_manager.logger, 'warning') as mock_warning:
        validated_config = config_manager._validate_config(invalid_config)

    assert validated_config == constants.config.defaults.DEFAULT_CONFIG
    assert mock_warning.call_count == 4


def test_validate_config_accepts_raw_platform_category(config_manager):
    validated = config_manager._validate_config({"size_category": "UICTContentSizeCategoryXXL"})
    assert validated["size_category"] == "UICTContentSizeCategoryXXL"


def test_validate_config_drops_unknown_keys(config_manager):
    with patch.object(config_manager.logger, 'warning') as mock_warning:
        validated = config_manager._validate_config({"theme": "dark"})
    assert "theme" not in validated
    mock_warning.assert_called_once()


def test_save_and_load_round_trip_on_disk(config_manager):
    settings = dict(constants.config.defaults.DEFAULT_CONFIG, size_category="small", font_family="Helvetica")
    config_manager.save(settings)

    reloaded = ConfigManager(config_manager.config_path).load()
    assert reloaded["size_category"] == "small"
    assert reloaded["font_family"] == "Helvetica"


def test_save_skips_unchanged_config(config_manager):
    config_manager.save(constants.config.defaults.DEFAULT_CONFIG)
    with patch("tempfile.NamedTemporaryFile") as mock_temp:
        config_manager.save(constants.config.defaults.DEFAULT_CONFIG)
    mock_temp.assert_not_called()


def test_corrupt_config_is_backed_up(config_manager):
    config_manager.config_path.write_text("{not json", encoding="utf-8")
    config = config_manager.load()

    assert config == constants.config.defaults.DEFAULT_CONFIG
    backup = config_manager.config_path.with_name(f"{config_manager.config_path.name}.corrupt")
    assert backup.read_text(encoding="utf-8") == "{not json"


def test_non_object_config_uses_defaults(config_manager):
    config_manager.config_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert config_manager.load() == constants.config.defaults.DEFAULT_CONFIG


def test_os_error_on_read_raises_config_error(config_manager):
    with patch.object(Path, "exists", return_value=True):
        with patch.object(Path, "open", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigError):
                config_manager.load()


def test_os_error_on_save_raises_config_error(config_manager):
    with patch("tempfile.NamedTemporaryFile", side_effect=OSError("disk full")):
        with pytest.raises(ConfigError):
            config_manager.save(dict(constants.config.defaults.DEFAULT_CONFIG, font_family="Courier"))


def test_size_category_member_is_saved_as_raw_value(config_manager):
    settings = dict(constants.config.defaults.DEFAULT_CONFIG, size_category=SizeCategory.ACCESSIBILITY_LARGE)
    config_manager.save(settings)

    assert [p.name for p in config_manager.config_path.parent.iterdir()] == [config_manager.config_path.name]
    stored = json.loads(config_manager.config_path.read_text(encoding="utf-8"))
    assert stored["size_category"] == SizeCategory.ACCESSIBILITY_LARGE.value

    reloaded = ConfigManager(config_manager.config_path).load()
    assert SizeCategory.from_value(reloaded["size_category"]) is SizeCategory.ACCESSIBILITY_LARGE


def test_serialization_error_on_save_raises_config_error_and_cleans_up(config_manager):
    with patch("dynamictype.utils.config.json.dump", side_effect=TypeError("not JSON serializable")):
        with pytest.raises(ConfigError):
            config_manager.save(dict(constants.config.defaults.DEFAULT_CONFIG, font_family="Courier"))
    assert list(config_manager.config_path.parent.iterdir()) == []


def test_setup_logging_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    logger = logging.getLogger(constants.app.APP_NAME)
    saved_handlers = list(logger.handlers)
    logger.handlers.clear()
    try:
        ConfigManager.setup_logging("DEBUG")
        handler_count = len(logger.handlers)
        assert handler_count == 2
        assert logger.level == logging.DEBUG

        ConfigManager.setup_logging("WARNING")
        assert len(logger.handlers) == handler_count
        assert logger.level == logging.WARNING
        assert all(h.level == logging.WARNING for h in logger.handlers)
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved_handlers
        logger.setLevel(logging.NOTSET)


def test_setup_logging_unknown_level_uses_console_default(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    logger = logging.getLogger(constants.app.APP_NAME)
    saved_handlers = list(logger.handlers)
    logger.handlers.clear()
    try:
        ConfigManager.setup_logging("CHATTY")
        assert logger.level == constants.logs.CONSOLE_LOG_LEVEL
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved_handlers
        logger.setLevel(logging.NOTSET)
