# -*- coding: utf-8 -*-
"""In-process TTL cache for public dataset responses.

Entries live in named regions so one region can be dropped without touching
the others. Expired entries are evicted lazily on read.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()

_lock = threading.Lock()
_regions: Dict[str, Dict[Hashable, Tuple[float, Any]]] = {}


def _lookup(region: str, key: Hashable, now: float) -> Any:
    entries = _regions.get(region)
    if not entries or key not in entries:
        return _MISSING
    expires_at, value = entries[key]
    if expires_at <= now:
        del entries[key]
        return _MISSING
    return value


def cache_set(region: str, key: Hashable, value: Any, ttl_seconds: float) -> None:
    with _lock:
        _regions.setdefault(region, {})[key] = (time.monotonic() + ttl_seconds, value)


def cache_get_or_load(region: str, key: Hashable, loader: Callable[[], T], ttl_seconds: float) -> T:
    """Return the live entry for ``key`` or store what ``loader`` returns.

    Empty results are cached too; a failing loader stores nothing.
    """
    with _lock:
        value = _lookup(region, key, time.monotonic())
    if value is not _MISSING:
        return value
    value = loader()
    cache_set(region, key, value, ttl_seconds)
    return value


def cache_clear(region: Optional[str] = None) -> None:
    with _lock:
        if region is None:
            _regions.clear()
        else:
            _regions.pop(region, None)
