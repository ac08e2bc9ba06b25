"""
Typography Preview Window.

Shows one sample line per standard text style and a size category picker.
Picking a category posts it through the SizeCategoryMonitor, and the window
restyles itself from the font map like any other dynamic-type screen.
"""
import logging
from typing import Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from dynamictype import constants
from dynamictype.core.font_map import FontMap, default_font_map
from dynamictype.core.notifications import DynamicFontMixin, SizeCategoryMonitor
from dynamictype.core.size_category import SIZE_CATEGORIES, SizeCategory
from dynamictype.core.text_style import STANDARD_TEXT_STYLES, TextStyle
from dynamictype.utils.helpers import format_point_size


class TypographyPreviewWindow(QWidget, DynamicFontMixin):
    """A window whose labels track the preferred size category."""

    def __init__(
        self,
        monitor: SizeCategoryMonitor,
        font_map: Optional[FontMap] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.PreviewWindow")
        self.monitor = monitor
        self.font_map = font_map if font_map is not None else default_font_map()
        self.labels: Dict[TextStyle, QLabel] = {}
        self.current_size_category: Optional[SizeCategory] = None

        self.setWindowTitle(constants.app.PREVIEW_WINDOW_TITLE)
        self._setup_ui()
        self.install_dynamic_type(monitor)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        picker_layout = QHBoxLayout()
        picker_layout.addWidget(QLabel("Text size:"))
        self.size_combo = QComboBox()
        for category in SIZE_CATEGORIES:
            self.size_combo.addItem(category.label, category)
        self.size_combo.currentIndexChanged.connect(self._on_size_selected)
        picker_layout.addWidget(self.size_combo, stretch=1)
        layout.addLayout(picker_layout)

        for style in STANDARD_TEXT_STYLES:
            label = QLabel(style.display_name)
            label.setObjectName(style.name.lower())
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            self.labels[style] = label
            layout.addWidget(label)

        layout.addStretch(1)

    def _on_size_selected(self, index: int) -> None:
        category = self.size_combo.itemData(index)
        if category is not None:
            self.monitor.set_size_category(category)

    def update_fonts(self, preferred_content_size: SizeCategory) -> None:
        """Applies the font map's fonts for the new size category to every label."""
        self.logger.debug("Updating fonts for %s", preferred_content_size.label)
        for style, label in self.labels.items():
            font = self.font_map.font(style, preferred_content_size)
            label.setFont(font)
            label.setText(f"{style.display_name} ({format_point_size(font.pointSizeF())})")
        self.current_size_category = preferred_content_size
        self._sync_combo(preferred_content_size)

    def _sync_combo(self, category: SizeCategory) -> None:
        if category not in SIZE_CATEGORIES:
            return
        index = SIZE_CATEGORIES.index(category)
        if index == self.size_combo.currentIndex():
            return
        self.size_combo.blockSignals(True)
        try:
            self.size_combo.setCurrentIndex(index)
        finally:
            self.size_combo.blockSignals(False)
