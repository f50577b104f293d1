# -*- coding: utf-8 -*-
"""Per-user catalog cache.

Entries never expire; the whole entry of a user is dropped on logout.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Hashable, Tuple, TypeVar

T = TypeVar("T")


class CatalogCache:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, Dict[Hashable, Any]] = {}

    def get_or_load(self, user_id: str, key: Hashable, loader: Callable[[], T]) -> T:
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is not None and key in entry:
                return entry[key]
        # Loaded outside the lock.
        value = loader()
        with self._lock:
            self._entries.setdefault(user_id, {})[key] = value
        return value

    def invalidate(self, user_id: str) -> None:
        with self._lock:
            self._entries.pop(user_id, None)

    def keys(self, user_id: str) -> Tuple[Hashable, ...]:
        with self._lock:
            return tuple(self._entries.get(user_id, {}))


catalog_cache = CatalogCache()
