"""
Unit tests for the preview application's startup error handling.
"""
from unittest.mock import patch

import typography_preview


def test_logging_setup_failure_is_reported():
    with patch("typography_preview.QApplication"), \
         patch("typography_preview.QMessageBox") as mock_box, \
         patch("typography_preview.ConfigManager.setup_logging", side_effect=PermissionError("read-only")), \
         patch.object(typography_preview.logging.getLogger("DynamicType.Main"), "critical") as mock_critical:
        assert typography_preview.main() == 1

    mock_critical.assert_called_once()
    mock_box.critical.assert_called_once()
    assert "read-only" in mock_box.critical.call_args[0][2]


def test_config_failure_is_reported():
    with patch("typography_preview.QApplication"), \
         patch("typography_preview.QMessageBox") as mock_box, \
         patch("typography_preview.ConfigManager") as mock_manager:
        mock_manager.return_value.load.side_effect = OSError("disk gone")
        assert typography_preview.main() == 1

    mock_box.critical.assert_called_once()
