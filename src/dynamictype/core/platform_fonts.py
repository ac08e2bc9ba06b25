"""
The platform font-description service used as the last-resort size source.

The default point-size table only knows ten roles and twelve categories. For
anything else it asks the host platform for the preferred point size of a
role. Under Qt the "platform" is the running QGuiApplication: its application
font is the user's body text size, and every other role is scaled from it by
the role's ratio to body at the default size category.
"""

import logging
from typing import Dict, Final, Hashable, Optional, Protocol, runtime_checkable

from PyQt6.QtGui import QGuiApplication

from dynamictype import constants
from dynamictype.core.text_style import TextStyle


logger = logging.getLogger(f"{constants.app.APP_NAME}.Platform")


class PlatformFontError(RuntimeError):
    """Raised when the platform cannot report a usable point size."""


@runtime_checkable
class PlatformFontService(Protocol):
    """Anything that can report the preferred point size for a text role."""

    def preferred_point_size(self, style: Hashable) -> float:
        ...


# Point sizes at the default (large) category; roles are scaled relative to body.
_DEFAULT_CATEGORY_SIZES: Final[Dict[TextStyle, float]] = {
    TextStyle.LARGE_TITLE: 34.0,
    TextStyle.TITLE1: 28.0,
    TextStyle.TITLE2: 22.0,
    TextStyle.TITLE3: 20.0,
    TextStyle.HEADLINE: 17.0,
    TextStyle.SUBHEADLINE: 15.0,
    TextStyle.BODY: 17.0,
    TextStyle.CALLOUT: 16.0,
    TextStyle.FOOTNOTE: 13.0,
    TextStyle.CAPTION1: 12.0,
    TextStyle.CAPTION2: 11.0,
}


class QtPlatformFontService:
    """
    Reports preferred point sizes from the live Qt application font.

    Roles without a known ratio (including arbitrary caller-defined roles) get
    the body size unchanged.
    """

    def __init__(self, body_point_size: Optional[float] = None) -> None:
        """
        Args:
            body_point_size: Fixed body size to scale from. When None, the size
                             is read from QGuiApplication.font() on every call so
                             it tracks live changes.
        """
        self._body_point_size = body_point_size

    def body_point_size(self) -> float:
        """Returns the platform body size, raising PlatformFontError if unavailable."""
        if self._body_point_size is not None:
            size = float(self._body_point_size)
        else:
            if QGuiApplication.instance() is None:
                raise PlatformFontError("No QGuiApplication instance; cannot query the platform font size.")
            size = QGuiApplication.font().pointSizeF()
        if size <= 0:
            raise PlatformFontError(f"Platform reported an unusable body point size: {size}")
        return size

    def preferred_point_size(self, style: Hashable) -> float:
        reference = _DEFAULT_CATEGORY_SIZES.get(style, constants.fonts.BODY_POINT_SIZE_AT_DEFAULT)
        ratio = reference / constants.fonts.BODY_POINT_SIZE_AT_DEFAULT
        size = round(self.body_point_size() * ratio, 1)
        logger.debug("Platform fallback size for %s: %.1fpt", style, size)
        return size


_default_service: Optional[QtPlatformFontService] = None


def default_platform_service() -> QtPlatformFontService:
    """Returns the process-wide Qt platform service, creating it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = QtPlatformFontService()
    return _default_service
