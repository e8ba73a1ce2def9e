"""Deterministic linear-congruential noise source.

The recurrence is ``seed' = (seed * 9301 + 49297) mod 233280`` with the value
``seed' / 233280`` in ``[0, 1)``.  Every intermediate product must stay an
exact integer in an IEEE-754 double so that double-based consumers reproduce
the same stream; seeds outside ``[0, MAX_SAFE_SEED]`` are rejected.
"""

from __future__ import annotations

import hashlib
import logging
import numbers
from typing import List, Optional, Tuple, Union

from .validate import SeedRangeError, ensure_count

logger = logging.getLogger(__name__)

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280

MAX_EXACT_INTEGER = 2**53 - 1
MAX_SAFE_SEED = (MAX_EXACT_INTEGER - INCREMENT) // MULTIPLIER

# Neuron i reads draws up to index 4i.
NODE_DRAW_STRIDE = 4


def check_seed(seed: object) -> int:
    """Return ``seed`` as an ``int`` or raise :class:`SeedRangeError`."""

    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise SeedRangeError(f"seed must be an integer (got {seed!r})")
    value = int(seed)
    if value < 0 or value > MAX_SAFE_SEED:
        raise SeedRangeError(f"seed {value} outside safe range [0, {MAX_SAFE_SEED}]")
    return value


def next_random(state: int) -> Tuple[float, int]:
    """Advance ``state`` once and return ``(value, next_state)``."""

    nxt = (check_seed(state) * MULTIPLIER + INCREMENT) % MODULUS
    return nxt / MODULUS, nxt


def random_at(seed: int, index: int) -> float:
    """Stateless draw for ``index``; equal to one step from ``seed * (index + 1)``."""

    seed = check_seed(seed)
    index = ensure_count("index", index)
    scaled = seed * (index + 1)
    if scaled > MAX_SAFE_SEED:
        raise SeedRangeError(
            f"seed {seed} at index {index} exceeds safe range (product {scaled} > {MAX_SAFE_SEED})"
        )
    return ((scaled * MULTIPLIER + INCREMENT) % MODULUS) / MODULUS


def max_count_for_seed(seed: int) -> Optional[int]:
    """Largest neuron count whose draws stay in range for ``seed``.

    Node ``i`` reads draw indices up to ``max(1, 4i)``, so ``count`` nodes
    need ``seed * (max(1, 4 * (count - 1)) + 1) <= MAX_SAFE_SEED``.  Seed 0
    has no limit and returns ``None``.
    """

    seed = check_seed(seed)
    if seed == 0:
        return None
    limit = MAX_SAFE_SEED // seed
    if limit < 2:
        return 0
    return (limit - 1) // NODE_DRAW_STRIDE + 1


def check_network_seed(seed: object, count: object) -> int:
    """Reject ``(seed, count)`` up front when some node would leave the safe range."""

    seed = check_seed(seed)
    count = ensure_count("count", count)
    limit = max_count_for_seed(seed)
    if limit is not None and count > limit:
        raise SeedRangeError(f"seed {seed} supports at most {limit} node(s) (got count {count})")
    return seed


def seed_from_identifier(identifier: Union[str, int]) -> int:
    """Convert an item identifier into a seed inside the safe range."""

    if isinstance(identifier, numbers.Integral) and not isinstance(identifier, bool):
        if 0 <= int(identifier) <= MAX_SAFE_SEED:
            return int(identifier)
    digest = hashlib.sha256(str(identifier).encode("utf8")).digest()
    return int.from_bytes(digest[:8], "little") % MODULUS


class SeededRandom:
    """Stateful wrapper over :func:`next_random`; one instance per call site."""

    __slots__ = ("_state",)

    def __init__(self, seed: int):
        self._state = check_seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def __call__(self) -> float:
        value, self._state = next_random(self._state)
        return value

    def take(self, count: int) -> List[float]:
        return [self() for _ in range(ensure_count("count", count))]

    def fork(self) -> "SeededRandom":
        """Return an independent generator positioned at the current state."""

        return SeededRandom(self._state)

    def __repr__(self) -> str:
        return f"SeededRandom(state={self._state})"
