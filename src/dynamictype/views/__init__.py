"""
Views submodule for DynamicType.

Contains the typography preview window used to inspect the font map.
"""

from .preview import TypographyPreviewWindow

__all__ = ["TypographyPreviewWindow"]
