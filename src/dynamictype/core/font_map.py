"""
Creates and caches fonts for a given style and size category.

`FontMap` wraps a creator function and memoizes its result per
(style, size category) pair. Entries are never evicted: the key space is the
set of roles an application uses times thirteen categories.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

from dynamictype import constants
from dynamictype.core.size_category import SizeCategory


StyleT = TypeVar("StyleT", bound=Hashable)
FontT = TypeVar("FontT")


class FontMap(Generic[StyleT, FontT]):
    """
    A two-level memo table: style -> {size category -> font}.

    The creator is called at most once per key over the lifetime of the map,
    even when several threads miss on the same key at once. A creator that
    raises leaves nothing behind, so the next lookup for that key retries.
    """

    def __init__(self, creator: Callable[[StyleT, SizeCategory], FontT]) -> None:
        """
        Args:
            creator: Builds the font for a (style, size category) pair. It must
                     return an equivalent font every time it is called with the
                     same arguments.
        """
        self.creator = creator
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self._cache: Dict[StyleT, Dict[SizeCategory, FontT]] = {}
        self._registry_lock = threading.Lock()
        self._key_locks: Dict[Tuple[StyleT, SizeCategory], List[Any]] = {}

    def font(self, style: StyleT, size_category: SizeCategory) -> FontT:
        """
        Returns the font for a style and size category, creating it on first use.

        Raises:
            Whatever the creator raises; the failure is not cached.
        """
        cached = self._lookup(style, size_category)
        if cached is not None:
            return cached[0]

        key = (style, size_category)
        lock = self._acquire_key_lock(key)
        try:
            with lock:
                cached = self._lookup(style, size_category)
                if cached is not None:
                    return cached[0]

                font = self.creator(style, size_category)
                self._cache.setdefault(style, {})[size_category] = font
                self.logger.debug("Cached font for (%s, %s)", style, size_category)
                return font
        finally:
            self._release_key_lock(key)

    resolve = font

    def cached_keys(self) -> List[Tuple[StyleT, SizeCategory]]:
        """Returns the (style, size category) pairs currently cached."""
        with self._registry_lock:
            return [(style, category) for style, row in self._cache.items() for category in row]

    def _lookup(self, style: StyleT, size_category: SizeCategory) -> Optional[Tuple[FontT]]:
        # Wrapped in a tuple so a cached None still counts as a hit.
        row = self._cache.get(style)
        if row is not None and size_category in row:
            return (row[size_category],)
        return None

    def _acquire_key_lock(self, key: Tuple[StyleT, SizeCategory]) -> threading.Lock:
        # A key lock stays registered while any thread holds or waits on it.
        with self._registry_lock:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = [threading.Lock(), 0]
                self._key_locks[key] = entry
            entry[1] += 1
            return entry[0]

    def _release_key_lock(self, key: Tuple[StyleT, SizeCategory]) -> None:
        with self._registry_lock:
            entry = self._key_locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._key_locks[key]

    def __len__(self) -> int:
        return sum(len(row) for row in self._cache.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self._lookup(key[0], key[1]) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self)})"


_default_font_map: Optional[FontMap] = None
_default_font_map_lock = threading.Lock()


def default_font_map() -> FontMap:
    """
    Returns the process-wide font map for the standard text styles.

    The map is created on first use with `default_font_mapping` and lives for
    the rest of the process unless replaced with `set_default_font_map`.
    """
    global _default_font_map
    with _default_font_map_lock:
        if _default_font_map is None:
            from dynamictype.core.point_sizes import default_font_mapping
            _default_font_map = FontMap(default_font_mapping)
        return _default_font_map


def set_default_font_map(font_map: Optional[FontMap]) -> None:
    """Replaces the shared font map; None discards it so the next access rebuilds it."""
    global _default_font_map
    with _default_font_map_lock:
        _default_font_map = font_map
