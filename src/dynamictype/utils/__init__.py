"""
Utilities submodule for DynamicType.

Provides helper functions and configuration management.
"""

from .config import ConfigManager, ConfigError
from .helpers import get_app_data_path, format_point_size

__all__ = ["ConfigManager", "ConfigError", "get_app_data_path", "format_point_size"]
