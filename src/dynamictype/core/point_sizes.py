"""
Default point sizes for the standard text styles at every size category.

The table mirrors the platform's built-in accessibility scaling curve. Each
role has explicit sizes for the six categories from extra-small through
extra-extra-large. Past that, every role except body saturates: the largest
non-accessibility category and all five accessibility categories share one
maximum size. Body keeps growing through all twelve categories.

Pairs missing from the table (an unspecified category, or a role without a
row) fall back to the platform font-description service.
"""

import logging
from typing import Callable, Dict, Final, Hashable, Optional, Tuple

from PyQt6.QtGui import QFont

from dynamictype import constants
from dynamictype.core.platform_fonts import PlatformFontService, default_platform_service
from dynamictype.core.size_category import SIZE_CATEGORIES, SizeCategory
from dynamictype.core.text_style import TextStyle


logger = logging.getLogger(f"{constants.app.APP_NAME}.PointSizes")

# (extra-small .. extra-extra-large), saturated size for XXXL and all accessibility steps
_SATURATING_ROWS: Final[Dict[TextStyle, Tuple[Tuple[int, ...], int]]] = {
    TextStyle.TITLE1: ((25, 26, 27, 28, 30, 32), 34),
    TextStyle.TITLE2: ((19, 20, 21, 22, 24, 26), 28),
    TextStyle.TITLE3: ((17, 18, 19, 20, 22, 24), 26),
    TextStyle.HEADLINE: ((14, 15, 16, 17, 19, 21), 23),
    TextStyle.SUBHEADLINE: ((12, 13, 14, 15, 17, 19), 21),
    TextStyle.CALLOUT: ((13, 14, 15, 16, 18, 20), 22),
    TextStyle.FOOTNOTE: ((12, 12, 12, 13, 15, 17), 19),
    TextStyle.CAPTION1: ((11, 11, 11, 12, 14, 16), 18),
    TextStyle.CAPTION2: ((11, 11, 11, 11, 13, 15), 17),
}

# Body never saturates: one strictly larger size per category.
_BODY_ROW: Final[Tuple[int, ...]] = (14, 15, 16, 17, 19, 21, 23, 28, 33, 40, 47, 53)


def _build_table() -> Dict[Tuple[TextStyle, SizeCategory], int]:
    table: Dict[Tuple[TextStyle, SizeCategory], int] = {}
    for style, (explicit, saturated) in _SATURATING_ROWS.items():
        sizes = explicit + (saturated,) * (len(SIZE_CATEGORIES) - len(explicit))
        for category, size in zip(SIZE_CATEGORIES, sizes):
            table[(style, category)] = size
    for category, size in zip(SIZE_CATEGORIES, _BODY_ROW):
        table[(TextStyle.BODY, category)] = size
    return table


_POINT_SIZE_TABLE: Final[Dict[Tuple[TextStyle, SizeCategory], int]] = _build_table()


def default_point_size(
    style: Hashable,
    size_category: object,
    platform: Optional[PlatformFontService] = None,
) -> float:
    """
    Returns the default point size for a style at a size category.

    Args:
        style: The text role. Only the ten standard TextStyle members have rows.
        size_category: A SizeCategory or anything SizeCategory.from_value accepts.
        platform: Fallback service for pairs missing from the table. Defaults to
                  the process-wide Qt service. Its answer is clamped to
                  the allowed point-size range.

    Raises:
        PlatformFontError: If the fallback is needed and the platform cannot answer.
    """
    category = SizeCategory.from_value(size_category)
    size = _POINT_SIZE_TABLE.get((style, category))
    if size is not None:
        return float(size)

    logger.debug("No table entry for (%s, %s); asking the platform.", style, category.label)
    service = platform if platform is not None else default_platform_service()
    reported = float(service.preferred_point_size(style))
    clamped = min(max(reported, constants.fonts.POINT_SIZE_MIN), constants.fonts.POINT_SIZE_MAX)
    if clamped != reported:
        logger.warning("Platform point size %s for %s is out of range; using %s.", reported, style, clamped)
    return clamped


def default_font(
    style: Hashable,
    size_category: object,
    platform: Optional[PlatformFontService] = None,
    family: Optional[str] = None,
) -> QFont:
    """
    The default font for a style and size category.

    Headline text is bold; every other role uses the regular weight.
    """
    point_size = default_point_size(style, size_category, platform)
    weight = constants.fonts.WEIGHT_BOLD if style == TextStyle.HEADLINE else constants.fonts.WEIGHT_REGULAR

    font = QFont(family or constants.fonts.DEFAULT_FONT)
    font.setPointSizeF(point_size)
    font.setWeight(QFont.Weight(weight))
    return font


def default_font_mapping(style: Hashable, size_category: SizeCategory) -> QFont:
    """The creator used by the default font map."""
    return default_font(style, size_category)


def make_font_mapping(
    family: Optional[str] = None,
    platform: Optional[PlatformFontService] = None,
) -> Callable[[Hashable, SizeCategory], QFont]:
    """Builds a default_font creator bound to a font family and platform service."""
    def mapping(style: Hashable, size_category: SizeCategory) -> QFont:
        return default_font(style, size_category, platform=platform, family=family)
    return mapping


def size_category_for_point_size(point_size: float) -> SizeCategory:
    """
    Maps a body point size back onto the canonical scale.

    Returns the category whose body size is closest; ties resolve to the
    smaller category.
    """
    if not point_size > 0:
        return SizeCategory.UNSPECIFIED
    best_index = min(range(len(_BODY_ROW)), key=lambda i: abs(_BODY_ROW[i] - point_size))
    return SIZE_CATEGORIES[best_index]
