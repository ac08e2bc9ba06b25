"""
Constants related to font family, point-size bounds, and weights used for dynamic type.
"""
from typing import Final

class FontConstants:
    """Defines font weights, point-size bounds, and the default family."""
    POINT_SIZE_MIN: Final[float] = 1.0
    POINT_SIZE_MAX: Final[float] = 200.0

    # Qt's weight scale (QFont.Weight), mirrored here so the table stays UI-agnostic.
    WEIGHT_REGULAR: Final[int] = 400
    WEIGHT_BOLD: Final[int] = 700

    DEFAULT_FONT: Final[str] = "Segoe UI"

    # Platform body size at the default size category, used when the host
    # application reports no usable font size of its own.
    BODY_POINT_SIZE_AT_DEFAULT: Final[float] = 17.0

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.POINT_SIZE_MAX < self.POINT_SIZE_MIN:
            raise ValueError("POINT_SIZE_MAX must be >= POINT_SIZE_MIN")
        if self.POINT_SIZE_MIN <= 0:
            raise ValueError("POINT_SIZE_MIN must be positive")
        if not (1 <= self.WEIGHT_REGULAR < self.WEIGHT_BOLD <= 1000):
            raise ValueError("Font weights must satisfy 1 <= REGULAR < BOLD <= 1000")
        if not self.DEFAULT_FONT:
            raise ValueError("DEFAULT_FONT must not be empty")

# Singleton instance for easy access
fonts = FontConstants()
