"""
The ordered catalog of text size categories.

A size category is one discrete step of the user's preferred text size. The
twelve canonical steps run from extra-small to the largest accessibility size;
anything the platform reports outside that set collapses to ``UNSPECIFIED``.
"""

from enum import Enum
from typing import Any, Dict, Final, Tuple


class SizeCategory(Enum):
    """
    A preferred content size category, keyed by its platform raw value.

    Members compare by catalog position, not by raw value, so sorting a list of
    categories yields smallest-to-largest order with ``UNSPECIFIED`` last.
    Constructing from an unknown raw value returns ``UNSPECIFIED`` instead of
    raising.
    """
    EXTRA_SMALL = "UICTContentSizeCategoryXS"
    SMALL = "UICTContentSizeCategoryS"
    MEDIUM = "UICTContentSizeCategoryM"
    LARGE = "UICTContentSizeCategoryL"
    EXTRA_LARGE = "UICTContentSizeCategoryXL"
    EXTRA_EXTRA_LARGE = "UICTContentSizeCategoryXXL"
    EXTRA_EXTRA_EXTRA_LARGE = "UICTContentSizeCategoryXXXL"
    ACCESSIBILITY_MEDIUM = "UICTContentSizeCategoryAccessibilityM"
    ACCESSIBILITY_LARGE = "UICTContentSizeCategoryAccessibilityL"
    ACCESSIBILITY_EXTRA_LARGE = "UICTContentSizeCategoryAccessibilityXL"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "UICTContentSizeCategoryAccessibilityXXL"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "UICTContentSizeCategoryAccessibilityXXXL"
    UNSPECIFIED = "_UICTContentSizeCategoryUnspecified"

    @classmethod
    def _missing_(cls, value: object) -> "SizeCategory":
        return cls.UNSPECIFIED

    @classmethod
    def from_value(cls, value: Any) -> "SizeCategory":
        """
        Converts any value to a size category without ever raising.

        Accepts a member, a platform raw value, or a member name in any common
        spelling ("extra_large", "extraLarge", "EXTRA-LARGE"). Everything else,
        including None, maps to ``UNSPECIFIED``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNSPECIFIED
        if value in cls._value2member_map_:
            return cls._value2member_map_[value]
        return _NORMALIZED_NAMES.get(_normalize_name(value), cls.UNSPECIFIED)

    @property
    def ordinal(self) -> int:
        """Position in the catalog; ``UNSPECIFIED`` is 12."""
        return _ORDINALS[self]

    @property
    def label(self) -> str:
        """Zero-padded, order-preserving display label, e.g. ``03-large-DEFAULT``."""
        return _LABELS[self]

    @property
    def is_accessibility_category(self) -> bool:
        return self in _ACCESSIBILITY_CATEGORIES

    def __str__(self) -> str:
        return self.label

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.ordinal >= other.ordinal


# All canonical size categories, smallest first, for easy iteration.
SIZE_CATEGORIES: Final[Tuple[SizeCategory, ...]] = (
    SizeCategory.EXTRA_SMALL,
    SizeCategory.SMALL,
    SizeCategory.MEDIUM,
    SizeCategory.LARGE,
    SizeCategory.EXTRA_LARGE,
    SizeCategory.EXTRA_EXTRA_LARGE,
    SizeCategory.EXTRA_EXTRA_EXTRA_LARGE,
    SizeCategory.ACCESSIBILITY_MEDIUM,
    SizeCategory.ACCESSIBILITY_LARGE,
    SizeCategory.ACCESSIBILITY_EXTRA_LARGE,
    SizeCategory.ACCESSIBILITY_EXTRA_EXTRA_LARGE,
    SizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE,
)

DEFAULT_SIZE_CATEGORY: Final[SizeCategory] = SizeCategory.LARGE

_DISPLAY_NAMES: Final[Dict[SizeCategory, str]] = {
    SizeCategory.EXTRA_SMALL: "extraSmall",
    SizeCategory.SMALL: "small",
    SizeCategory.MEDIUM: "medium",
    SizeCategory.LARGE: "large-DEFAULT",
    SizeCategory.EXTRA_LARGE: "extraLarge",
    SizeCategory.EXTRA_EXTRA_LARGE: "extraExtraLarge",
    SizeCategory.EXTRA_EXTRA_EXTRA_LARGE: "extraExtraExtraLarge",
    SizeCategory.ACCESSIBILITY_MEDIUM: "accessibilityMedium",
    SizeCategory.ACCESSIBILITY_LARGE: "accessibilityLarge",
    SizeCategory.ACCESSIBILITY_EXTRA_LARGE: "accessibilityExtraLarge",
    SizeCategory.ACCESSIBILITY_EXTRA_EXTRA_LARGE: "accessibilityExtraExtraLarge",
    SizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE: "accessibilityExtraExtraExtraLarge",
    SizeCategory.UNSPECIFIED: "unspecified",
}

_ORDINALS: Final[Dict[SizeCategory, int]] = {
    category: index for index, category in enumerate(SIZE_CATEGORIES + (SizeCategory.UNSPECIFIED,))
}

_LABELS: Final[Dict[SizeCategory, str]] = {
    category: f"{_ORDINALS[category]:02d}-{_DISPLAY_NAMES[category]}" for category in SizeCategory
}

_ACCESSIBILITY_CATEGORIES: Final[frozenset] = frozenset(SIZE_CATEGORIES[7:])


def _normalize_name(name: str) -> str:
    return name.replace("_", "").replace("-", "").replace(" ", "").lower()


_NORMALIZED_NAMES: Final[Dict[str, SizeCategory]] = {
    _normalize_name(category.name): category for category in SizeCategory
}


def describe(value: Any) -> str:
    """
    Returns the display label for any value, recognized or not.

    >>> describe(SizeCategory.LARGE)
    '03-large-DEFAULT'
    >>> describe("UICTContentSizeCategoryFuture")
    '12-unspecified'
    """
    return SizeCategory.from_value(value).label
