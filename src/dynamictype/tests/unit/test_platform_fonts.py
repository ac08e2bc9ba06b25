"""
Unit tests for the Qt-backed platform font-description service.
"""
import pytest
from unittest.mock import MagicMock, patch

from dynamictype.core.platform_fonts import (
    PlatformFontError, PlatformFontService, QtPlatformFontService, default_platform_service
)
from dynamictype.core.text_style import TextStyle


@pytest.fixture
def mock_qgui():
    """Patches QGuiApplication so the application font size is controllable."""
    with patch("dynamictype.core.platform_fonts.QGuiApplication") as MockApp:
        MockApp.instance.return_value = MagicMock()
        MockApp.font.return_value.pointSizeF.return_value = 17.0
        yield MockApp


def test_body_tracks_application_font(mock_qgui):
    service = QtPlatformFontService()
    assert service.preferred_point_size(TextStyle.BODY) == 17.0

    mock_qgui.font.return_value.pointSizeF.return_value = 21.0
    assert service.preferred_point_size(TextStyle.BODY) == 21.0


def test_roles_scale_relative_to_body(mock_qgui):
    service = QtPlatformFontService()
    assert service.preferred_point_size(TextStyle.LARGE_TITLE) == 34.0
    assert service.preferred_point_size(TextStyle.TITLE1) == 28.0
    assert service.preferred_point_size(TextStyle.CAPTION2) == 11.0


def test_fixed_body_size_skips_qt():
    service = QtPlatformFontService(body_point_size=20)
    assert service.preferred_point_size(TextStyle.BODY) == 20.0
    assert service.preferred_point_size(TextStyle.LARGE_TITLE) == 40.0
    assert service.preferred_point_size(TextStyle.TITLE1) == 32.9


def test_unknown_roles_get_body_size():
    service = QtPlatformFontService(body_point_size=15)
    assert service.preferred_point_size("custom-role") == 15.0


def test_missing_application_raises(mock_qgui):
    mock_qgui.instance.return_value = None
    with pytest.raises(PlatformFontError):
        QtPlatformFontService().preferred_point_size(TextStyle.BODY)


def test_unusable_application_font_raises(mock_qgui):
    # Pixel-sized fonts report a point size of -1.
    mock_qgui.font.return_value.pointSizeF.return_value = -1.0
    with pytest.raises(PlatformFontError):
        QtPlatformFontService().body_point_size()


def test_service_satisfies_protocol_and_is_shared():
    service = default_platform_service()
    assert isinstance(service, PlatformFontService)
    assert default_platform_service() is service
