"""Memoization of pure layout results keyed by item identity and options."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional, Sequence, Tuple, TypeVar

from .utils import identity_digest, item_keys
from .validate import ensure_count

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()

CacheKey = Tuple[str, str, Hashable]


class LayoutCache:
    """Small LRU cache for generator output.

    Entries are keyed by ``(generator name, digest of item identities,
    options)``; any change in identity order or options is a different key.
    Options must be hashable (the frozen option dataclasses are).

    The cache may be shared between threads.  Lookups and stores take an
    internal lock; ``compute`` runs without it, so two threads missing the
    same key may both compute it and the later store wins.
    """

    def __init__(self, maxsize: int = 128):
        self.maxsize = ensure_count("maxsize", maxsize)
        self._entries: "OrderedDict[CacheKey, Any]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self._lock = threading.Lock()

    @staticmethod
    def make_key(name: str, items: Sequence[Any], options: Hashable = None) -> CacheKey:
        return (name, identity_digest(item_keys(items)), options)

    def get_or_compute(
        self,
        name: str,
        items: Sequence[Any],
        options: Hashable,
        compute: Callable[[], T],
    ) -> T:
        key = self.make_key(name, items, options)
        with self._lock:
            cached = self._entries.get(key, _MISSING)
            if cached is not _MISSING:
                self.hits += 1
                self._entries.move_to_end(key)
                return cached
            self.misses += 1

        result = compute()
        if self.maxsize == 0:
            return result
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted layout cache entry for %s", evicted[0])
        return result

    def invalidate(self, name: Optional[str] = None) -> int:
        """Drop entries for ``name`` (all entries when ``None``); return how many."""

        with self._lock:
            if name is None:
                dropped = len(self._entries)
                self._entries.clear()
                return dropped
            stale = [key for key in self._entries if key[0] == name]
            for key in stale:
                del self._entries[key]
            return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
