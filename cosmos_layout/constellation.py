"""Named star patterns keyed by exact point count, with a circular fallback.

Patterns are looked up once per call by count.  Phase data that does not fit
the pattern (out-of-range indices, missing completion flags) simply yields no
line, and a phase count that is not a non-negative integer is treated as
zero phases; nothing here raises for bad phase data.
"""

from __future__ import annotations

import enum
import logging
import math
import numbers
from typing import Dict, List, Optional, Sequence, Tuple

from .model import ConstellationPattern, IndexPair, Point2D, PointConnection
from .spiral import circular_position
from .utils import dedupe_pairs

logger = logging.getLogger(__name__)

STAR_SCALE = 12.0


class ConstellationKind(enum.Enum):
    ORION_BELT = "orion_belt"
    CRUX = "crux"
    CASSIOPEIA = "cassiopeia"
    BIG_DIPPER = "big_dipper"
    GENERIC = "generic"


CONSTELLATION_PATTERNS: Dict[int, ConstellationPattern] = {
    3: ConstellationPattern(
        name=ConstellationKind.ORION_BELT.value,
        points=((-1.0, 1.0), (0.0, 0.0), (1.0, -1.0)),
        connections=((0, 1), (1, 2)),
    ),
    4: ConstellationPattern(
        name=ConstellationKind.CRUX.value,
        points=((0.0, -1.8), (-1.2, -0.3), (1.2, -0.5), (0.0, 1.8)),
        connections=((0, 3), (1, 2)),
    ),
    5: ConstellationPattern(
        name=ConstellationKind.CASSIOPEIA.value,
        points=((-1.8, -1.2), (-0.8, 0.8), (0.2, 0.0), (1.2, 0.8), (1.8, -1.2)),
        connections=((0, 1), (1, 2), (2, 3), (3, 4)),
    ),
    7: ConstellationPattern(
        name=ConstellationKind.BIG_DIPPER.value,
        points=(
            # handle
            (-2.5, 1.5),
            (-1.5, 1.2),
            (-0.5, 0.8),
            # bucket
            (0.5, 0.5),
            (1.5, -0.5),
            (2.2, 0.8),
            (1.2, 1.8),
        ),
        connections=((0, 1), (1, 2), (2, 3), (3, 6), (6, 5), (5, 4), (4, 3)),
    ),
}

# Unit-square shapes for the vision-star widget; these close their outline.
VISION_PATTERNS: Dict[int, ConstellationPattern] = {
    3: ConstellationPattern(
        name="triangle",
        points=((0.0, 0.0), (1.0, 0.5), (0.5, 1.0)),
        connections=((0, 1), (1, 2), (2, 0)),
    ),
    4: ConstellationPattern(
        name="diamond",
        points=((0.5, 0.0), (1.0, 0.5), (0.5, 1.0), (0.0, 0.5)),
        connections=((0, 1), (1, 2), (2, 3), (3, 0)),
    ),
    5: ConstellationPattern(
        name="pentagon",
        points=((0.5, 0.0), (1.0, 0.4), (0.8, 1.0), (0.2, 1.0), (0.0, 0.4)),
        connections=((0, 1), (1, 2), (2, 3), (3, 4), (4, 0)),
    ),
    6: ConstellationPattern(
        name="hexagon",
        points=((0.5, 0.0), (1.0, 0.25), (1.0, 0.75), (0.5, 1.0), (0.0, 0.75), (0.0, 0.25)),
        connections=((0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0)),
    ),
    7: ConstellationPattern(
        name="big_dipper",
        points=((0.0, 0.3), (0.3, 0.2), (0.6, 0.1), (0.9, 0.0), (1.0, 0.3), (0.8, 0.6), (0.5, 0.5)),
        connections=((0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 3)),
    ),
}


def kind_for(count: int) -> ConstellationKind:
    pattern = CONSTELLATION_PATTERNS.get(_phase_total(count))
    if pattern is None:
        return ConstellationKind.GENERIC
    return ConstellationKind(pattern.name)


def _generic_pattern(count: int) -> ConstellationPattern:
    points = tuple(circular_position(i, count) for i in range(count)) if count > 0 else ()
    connections = tuple((i - 1, i) for i in range(1, count))
    return ConstellationPattern(name=ConstellationKind.GENERIC.value, points=points, connections=connections)


def _phase_total(count: object) -> int:
    # Anything but a non-negative integer counts as "no phases".
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        return 0
    return max(int(count), 0)


def resolve_pattern(count: int) -> ConstellationPattern:
    """Return the named pattern for ``count`` or the generic circular path."""

    total = _phase_total(count)
    pattern = CONSTELLATION_PATTERNS.get(total)
    if pattern is not None:
        return pattern
    return _generic_pattern(total)


def _completed(flags: Sequence[bool], index: int) -> bool:
    return 0 <= index < len(flags) and bool(flags[index])


def connections_for(phase_count: int, completion_flags: Optional[Sequence[bool]]) -> List[IndexPair]:
    """Pattern lines whose two phases are both completed.

    ``None`` flags mean nothing is completed yet.
    """

    phase_count = _phase_total(phase_count)
    if completion_flags is None:
        completion_flags = ()
    pattern = resolve_pattern(phase_count)
    result: List[IndexPair] = []
    for start, end in pattern.connections:
        if start < 0 or end < 0 or start >= phase_count or end >= phase_count:
            continue
        if _completed(completion_flags, start) and _completed(completion_flags, end):
            result.append((start, end))
    logger.debug(
        "Constellation %s: %d of %d lines lit", pattern.name, len(result), len(pattern.connections)
    )
    return result


def star_positions(
    phase_count: int,
    planet_x: float,
    planet_y: float,
    scale: float = STAR_SCALE,
) -> List[Point2D]:
    """Absolute star position of every phase around a planetoid."""

    pattern = resolve_pattern(phase_count)
    return [(planet_x + x * scale, planet_y + y * scale) for x, y in pattern.points]


def lit_segments(
    phase_count: int,
    completion_flags: Optional[Sequence[bool]],
    planet_x: float,
    planet_y: float,
    scale: float = STAR_SCALE,
) -> List[PointConnection]:
    """Completed pattern lines expressed as point pairs."""

    stars = star_positions(phase_count, planet_x, planet_y, scale)
    return [
        PointConnection(from_point=stars[start], to_point=stars[end])
        for start, end in connections_for(phase_count, completion_flags)
    ]


def _circular_vision_pattern(count: int) -> ConstellationPattern:
    points: List[Point2D] = []
    connections: List[Tuple[int, int]] = []
    for i in range(count):
        angle = (i / count) * 2 * math.pi - math.pi / 2
        points.append((0.5 + 0.4 * math.cos(angle), 0.5 + 0.4 * math.sin(angle)))
        connections.append((i, (i + 1) % count))
    return ConstellationPattern(name="circle", points=tuple(points), connections=tuple(dedupe_pairs(connections)))


def vision_pattern(count: int, override: Optional[ConstellationPattern] = None) -> ConstellationPattern:
    """Closed outline for ``count`` vision stars; ``override`` wins when given."""

    if override is not None:
        return override
    total = _phase_total(count)
    return VISION_PATTERNS.get(total) or _circular_vision_pattern(total)
