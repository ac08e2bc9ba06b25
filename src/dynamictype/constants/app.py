"""
Constants for application metadata.
"""

from typing import Final

class AppConstants:
    """Defines library metadata and the logger namespace."""
    APP_NAME: Final[str] = "DynamicType"
    VERSION: Final[str] = "1.0.0"
    PREVIEW_WINDOW_TITLE: Final[str] = "DynamicType Preview"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the constants to ensure they meet constraints."""
        if not self.APP_NAME:
            raise ValueError("APP_NAME must not be empty")
        if not self.VERSION:
            raise ValueError("VERSION must not be empty")
        if not self.PREVIEW_WINDOW_TITLE:
            raise ValueError("PREVIEW_WINDOW_TITLE must not be empty")

# Singleton instance for easy access
app = AppConstants()
