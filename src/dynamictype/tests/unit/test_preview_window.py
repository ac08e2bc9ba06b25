"""
Unit tests for the TypographyPreviewWindow.
"""
import pytest
from unittest.mock import MagicMock

from dynamictype.core.font_map import FontMap
from dynamictype.core.notifications import SizeCategoryMonitor
from dynamictype.core.point_sizes import default_font_mapping
from dynamictype.core.size_category import SIZE_CATEGORIES, SizeCategory
from dynamictype.core.text_style import STANDARD_TEXT_STYLES, TextStyle
from dynamictype.views.preview import TypographyPreviewWindow


@pytest.fixture
def monitor(q_app):
    return SizeCategoryMonitor()


@pytest.fixture
def window(monitor):
    w = TypographyPreviewWindow(monitor=monitor, font_map=FontMap(default_font_mapping))
    yield w
    w.deleteLater()


def test_initial_display_uses_current_category(window):
    assert window.current_size_category is SizeCategory.LARGE
    assert set(window.labels) == set(STANDARD_TEXT_STYLES)
    assert window.labels[TextStyle.BODY].font().pointSizeF() == 17
    assert window.labels[TextStyle.BODY].text() == "Body (17pt)"
    assert window.size_combo.count() == len(SIZE_CATEGORIES)
    assert window.size_combo.currentIndex() == SIZE_CATEGORIES.index(SizeCategory.LARGE)


def test_notification_restyles_labels(window, monitor):
    monitor.post(SizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE)
    assert window.labels[TextStyle.BODY].font().pointSizeF() == 53
    assert window.labels[TextStyle.TITLE1].font().pointSizeF() == 34
    assert window.labels[TextStyle.HEADLINE].font().bold()
    assert window.size_combo.currentIndex() == 11


def test_picking_a_category_updates_monitor(window, monitor):
    window.size_combo.setCurrentIndex(0)
    assert monitor.size_category is SizeCategory.EXTRA_SMALL
    assert window.current_size_category is SizeCategory.EXTRA_SMALL
    assert window.labels[TextStyle.CAPTION2].text() == "Caption 2 (11pt)"


def test_fonts_come_from_the_font_map(monitor):
    font_map = FontMap(default_font_mapping)
    window = TypographyPreviewWindow(monitor=monitor, font_map=font_map)
    assert len(font_map) == len(STANDARD_TEXT_STYLES)

    monitor.post(SizeCategory.LARGE)
    assert len(font_map) == len(STANDARD_TEXT_STYLES)
    cached = font_map.font(TextStyle.TITLE2, SizeCategory.LARGE)
    assert window.labels[TextStyle.TITLE2].font().pointSizeF() == cached.pointSizeF() == 22
    assert window.labels[TextStyle.TITLE2].font().family() == cached.family()
    window.deleteLater()


def test_unspecified_category_keeps_combo_selection(window, monitor):
    real_map = window.font_map
    fallback_map = MagicMock()
    fallback_map.font.side_effect = lambda style, category: real_map.font(style, SizeCategory.MEDIUM)
    window.font_map = fallback_map

    monitor.post("UICTContentSizeCategoryFromTheFuture")
    assert window.current_size_category is SizeCategory.UNSPECIFIED
    assert window.size_combo.currentIndex() == SIZE_CATEGORIES.index(SizeCategory.LARGE)
    fallback_map.font.assert_any_call(TextStyle.BODY, SizeCategory.UNSPECIFIED)
