"""
Semantic text styles (roles) understood by the default point-size table.
"""

from enum import Enum
from typing import Final, Tuple


class TextStyle(Enum):
    """A semantic text role, keyed by its platform raw value."""
    LARGE_TITLE = "UICTFontTextStyleTitle0"
    TITLE1 = "UICTFontTextStyleTitle1"
    TITLE2 = "UICTFontTextStyleTitle2"
    TITLE3 = "UICTFontTextStyleTitle3"
    HEADLINE = "UICTFontTextStyleHeadline"
    SUBHEADLINE = "UICTFontTextStyleSubhead"
    BODY = "UICTFontTextStyleBody"
    CALLOUT = "UICTFontTextStyleCallout"
    FOOTNOTE = "UICTFontTextStyleFootnote"
    CAPTION1 = "UICTFontTextStyleCaption1"
    CAPTION2 = "UICTFontTextStyleCaption2"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``Title 1`` or ``Large Title``."""
        words = self.name.replace("_", " ").title()
        if words[-1].isdigit():
            return f"{words[:-1]} {words[-1]}"
        return words


# The ten roles that have explicit rows in the default point-size table.
# LARGE_TITLE has no row and is always sized by the platform.
STANDARD_TEXT_STYLES: Final[Tuple[TextStyle, ...]] = (
    TextStyle.TITLE1,
    TextStyle.TITLE2,
    TextStyle.TITLE3,
    TextStyle.HEADLINE,
    TextStyle.SUBHEADLINE,
    TextStyle.BODY,
    TextStyle.CALLOUT,
    TextStyle.FOOTNOTE,
    TextStyle.CAPTION1,
    TextStyle.CAPTION2,
)
