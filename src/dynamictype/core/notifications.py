"""
Size-preference change notifications and the UI update protocol.

This module exposes the current preferred size category as a Qt signal and
wires UI components that implement `update_fonts` to it. Components are never
discovered automatically; a screen opts in once during its own initialization
through `DynamicFontMixin.install_dynamic_type`.
"""

import logging
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from PyQt6.QtCore import QEvent, QObject, pyqtSignal
from PyQt6.QtGui import QGuiApplication

from dynamictype import constants
from dynamictype.core.point_sizes import size_category_for_point_size
from dynamictype.core.size_category import DEFAULT_SIZE_CATEGORY, SizeCategory


@runtime_checkable
class RespondsToDynamicFont(Protocol):
    """A UI component that can restyle itself for a new size category."""

    def update_fonts(self, preferred_content_size: SizeCategory) -> None:
        ...


class SizeCategoryMonitor(QObject):
    """
    Tracks the user's preferred size category and announces changes.

    Signals:
        size_category_changed (object): Emitted with the new SizeCategory.
    """

    size_category_changed = pyqtSignal(object)

    def __init__(
        self,
        initial: Any = DEFAULT_SIZE_CATEGORY,
        follow_application_font: bool = False,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.SizeCategoryMonitor")
        self._size_category = SizeCategory.from_value(initial)
        self._following_application_font = False

        if follow_application_font:
            self._follow_application_font()

    @property
    def size_category(self) -> SizeCategory:
        return self._size_category

    @property
    def is_following_application_font(self) -> bool:
        return self._following_application_font

    def set_size_category(self, value: Any) -> bool:
        """
        Updates the preferred size category.

        Unrecognized values become UNSPECIFIED. The signal is only emitted when
        the category actually changes.

        Returns:
            True if the category changed.
        """
        category = SizeCategory.from_value(value)
        if category == self._size_category:
            return False
        self.logger.info("Preferred size category changed: %s -> %s", self._size_category.label, category.label)
        self._size_category = category
        self.size_category_changed.emit(category)
        return True

    def post(self, value: Any) -> None:
        """Emits a change notification unconditionally, as the platform would."""
        self._size_category = SizeCategory.from_value(value)
        self.logger.debug("Posting size category notification: %s", self._size_category.label)
        self.size_category_changed.emit(self._size_category)

    def _follow_application_font(self) -> None:
        app = QGuiApplication.instance()
        if app is None:
            self.logger.warning("No QGuiApplication instance; cannot follow application font changes.")
            return
        app.installEventFilter(self)
        self._following_application_font = True
        self._on_application_font_changed()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.ApplicationFontChange:
            self._on_application_font_changed()
        return False

    def _on_application_font_changed(self) -> None:
        point_size = QGuiApplication.font().pointSizeF()
        category = size_category_for_point_size(point_size)
        self.logger.debug("Application font is %.1fpt, mapped to %s", point_size, category.label)
        self.set_size_category(category)


def subscribe(
    responder: Any,
    monitor: SizeCategoryMonitor,
    notify_initial: bool = False,
) -> Callable[[SizeCategory], None]:
    """
    Connects a responder's `update_fonts` to the monitor's change signal.

    Args:
        responder: Any object implementing RespondsToDynamicFont.
        monitor: The monitor to listen to.
        notify_initial: Also call the responder once now with the current category.

    Returns:
        The connected slot.

    Raises:
        TypeError: If the responder does not implement `update_fonts`.
    """
    if not isinstance(responder, RespondsToDynamicFont):
        raise TypeError(f"{type(responder).__name__} does not implement update_fonts(preferred_content_size)")

    slot = responder.update_fonts
    monitor.size_category_changed.connect(slot)
    if notify_initial:
        slot(monitor.size_category)
    return slot


def unsubscribe(responder: Any, monitor: SizeCategoryMonitor) -> bool:
    """Disconnects a responder. Returns False if it was not connected."""
    try:
        monitor.size_category_changed.disconnect(responder.update_fonts)
    except (TypeError, AttributeError):
        monitor.logger.debug("%s was not subscribed.", type(responder).__name__)
        return False
    return True


class DynamicFontMixin:
    """
    Subscribes a screen to size category changes from its own initializer.

    Subclasses implement `update_fonts` and call `install_dynamic_type(monitor)`
    once after building their widgets. Repeated calls with the same monitor
    are ignored.
    """

    _dynamic_type_monitor: Optional[SizeCategoryMonitor] = None

    def install_dynamic_type(self, monitor: SizeCategoryMonitor, notify_initial: bool = True) -> None:
        if self._dynamic_type_monitor is monitor:
            return
        if self._dynamic_type_monitor is not None:
            unsubscribe(self, self._dynamic_type_monitor)
        subscribe(self, monitor, notify_initial=notify_initial)
        self._dynamic_type_monitor = monitor

    def uninstall_dynamic_type(self) -> None:
        if self._dynamic_type_monitor is not None:
            unsubscribe(self, self._dynamic_type_monitor)
            self._dynamic_type_monitor = None
