"""
Provides centralized, immutable constants for the DynamicType library.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from dynamictype import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access a default configuration value
    family = constants.config.defaults.DEFAULT_FONT_FAMILY

    # Access the bold weight used for headline text
    font.setWeight(QFont.Weight(constants.fonts.WEIGHT_BOLD))
"""

from .app import app
from .config import config
from .fonts import fonts
from .logs import logs

# Validation happens on instantiation of each singleton within its own module.

__all__ = [
    "app",
    "config",
    "fonts",
    "logs",
]
