"""
Core submodule for DynamicType.

Contains the size category catalog, the default point-size table, the font
map cache and the size-preference notification plumbing.
"""

from dynamictype.core.font_map import FontMap, default_font_map, set_default_font_map
from dynamictype.core.notifications import (
    DynamicFontMixin,
    RespondsToDynamicFont,
    SizeCategoryMonitor,
    subscribe,
    unsubscribe,
)
from dynamictype.core.platform_fonts import PlatformFontError, PlatformFontService, QtPlatformFontService
from dynamictype.core.point_sizes import (
    default_font,
    default_font_mapping,
    default_point_size,
    make_font_mapping,
    size_category_for_point_size,
)
from dynamictype.core.size_category import DEFAULT_SIZE_CATEGORY, SIZE_CATEGORIES, SizeCategory, describe
from dynamictype.core.text_style import STANDARD_TEXT_STYLES, TextStyle

__all__ = [
    "DEFAULT_SIZE_CATEGORY",
    "DynamicFontMixin",
    "FontMap",
    "PlatformFontError",
    "PlatformFontService",
    "QtPlatformFontService",
    "RespondsToDynamicFont",
    "SIZE_CATEGORIES",
    "STANDARD_TEXT_STYLES",
    "SizeCategory",
    "SizeCategoryMonitor",
    "TextStyle",
    "default_font",
    "default_font_map",
    "default_font_mapping",
    "default_point_size",
    "describe",
    "make_font_mapping",
    "set_default_font_map",
    "size_category_for_point_size",
    "subscribe",
    "unsubscribe",
]
