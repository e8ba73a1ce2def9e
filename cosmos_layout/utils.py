"""Utility helpers shared across layout modules."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping as MappingABC
from typing import Any, Iterable, List, Sequence, Tuple

from .model import IndexPair

_IDENTITY_KEYS = ("id", "key", "uid")


def normalize_edge(edge: IndexPair) -> IndexPair:
    a, b = edge
    return (a, b) if a <= b else (b, a)


def item_key(item: Any, index: int) -> str:
    """Return the stable identity string for ``item`` (falls back to its index)."""

    if isinstance(item, (str, int)) and not isinstance(item, bool):
        return str(item)
    if isinstance(item, MappingABC):
        for name in _IDENTITY_KEYS:
            value = item.get(name)
            if value is not None:
                return str(value)
    else:
        for name in _IDENTITY_KEYS:
            value = getattr(item, name, None)
            if value is not None:
                return str(value)
    return f"#{index}"


def item_keys(items: Iterable[Any]) -> List[str]:
    return [item_key(item, idx) for idx, item in enumerate(items)]


def identity_digest(keys: Sequence[str]) -> str:
    # Length-prefixed so ("a", "bc") and ("ab", "c") differ.
    hasher = hashlib.sha256()
    for key in keys:
        encoded = key.encode("utf8")
        hasher.update(len(encoded).to_bytes(4, "little"))
        hasher.update(encoded)
    return hasher.hexdigest()


def dedupe_pairs(pairs: Iterable[IndexPair]) -> List[Tuple[int, int]]:
    """Drop self-loops and repeated unordered pairs, keeping first-seen order."""

    seen = set()
    result: List[Tuple[int, int]] = []
    for a, b in pairs:
        if a == b:
            continue
        key = normalize_edge((a, b))
        if key in seen:
            continue
        seen.add(key)
        result.append((a, b))
    return result
