"""
Helper utilities for DynamicType.

This module provides the per-user data directory lookup and small formatting
helpers used by the preview window and diagnostics.
"""

import os
import logging
from typing import Optional
from pathlib import Path

from dynamictype import constants


def get_app_data_path() -> Path:
    """
    Retrieve the per-user application data directory, creating it if needed.

    Uses APPDATA on Windows, XDG_CONFIG_HOME elsewhere, and the home directory
    when neither is set.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    base: Optional[str] = os.getenv("APPDATA") or os.getenv("XDG_CONFIG_HOME")
    if not base:
        base = os.path.expanduser("~")
        logger.debug("No APPDATA or XDG_CONFIG_HOME set, using home directory: %s", base)
    path: Path = Path(base) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        test_file = path / f".dt_write_test_{os.getpid()}"
        with open(test_file, 'w') as f:
            f.write("test")
        test_file.unlink()
        logger.debug("App data path ensured and writable: %s", path)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating/writing to app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create or verify app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e


def format_point_size(point_size: float) -> str:
    """
    Format a point size for display, dropping a trailing ``.0``.

    >>> format_point_size(17.0)
    '17pt'
    >>> format_point_size(17.5)
    '17.5pt'
    """
    if not isinstance(point_size, (int, float)):
        raise TypeError(f"Point size must be a number (int or float), got {type(point_size)}")
    value = round(float(point_size), 1)
    if value.is_integer():
        return f"{int(value)}pt"
    return f"{value:.1f}pt"
