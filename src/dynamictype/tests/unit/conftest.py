import os

import pytest
from PyQt6.QtWidgets import QApplication

from dynamictype.core.font_map import set_default_font_map

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def fresh_default_font_map():
    """Discards the shared font map around every test."""
    set_default_font_map(None)
    yield
    set_default_font_map(None)
