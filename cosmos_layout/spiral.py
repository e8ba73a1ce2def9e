"""Radial placement: golden-angle spiral, unit circle and orbital lanes."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Sequence, Tuple

from .model import LayoutNode, Point2D, SpiralOptions, SpiralPoint
from .utils import item_key
from .validate import (
    ConfigurationError,
    ensure_count,
    ensure_finite,
    ensure_non_negative,
    ensure_positive,
    validate_spiral_options,
)

logger = logging.getLogger(__name__)

DEFAULT_SPIRAL_CONSTANT = 2.4
GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))

ORBIT_LANES = 4
ORBIT_RADIUS_BASE = 15.0
ORBIT_SPACING = 5.0


def spiral_position(
    index: int,
    center_x: float = 50.0,
    center_y: float = 50.0,
    spread_factor: float = 12.0,
    zoom_level: float = 1.0,
    spiral_constant: float = DEFAULT_SPIRAL_CONSTANT,
) -> SpiralPoint:
    """Return the phyllotaxis position of ``index``.

    The radius grows with ``sqrt(index + 1)`` so every successive item covers
    roughly the same annular area; ``zoom_level`` divides the displacement
    from the centre uniformly.
    """

    index = ensure_count("index", index)
    zoom = ensure_positive("zoom_level", zoom_level)
    spread = ensure_non_negative("spread_factor", spread_factor)
    cx = ensure_finite("center_x", center_x)
    cy = ensure_finite("center_y", center_y)

    angle = index * ensure_finite("spiral_constant", spiral_constant)
    radius = math.sqrt(index + 1) * spread
    return SpiralPoint(
        x=cx + math.cos(angle) * radius / zoom,
        y=cy + math.sin(angle) * radius / zoom,
        angle=angle,
        radius=radius,
    )


def circular_position(index: int, total: int) -> Point2D:
    """Place ``index`` of ``total`` evenly on the unit circle, starting at 12 o'clock."""

    total = ensure_count("total", total)
    if total == 0:
        raise ConfigurationError("total must be > 0 for circular placement")
    angle = (index / total) * math.pi * 2 - math.pi / 2
    return (math.cos(angle), math.sin(angle))


def layout_spiral(items: Sequence[Any], options: Optional[SpiralOptions] = None) -> Tuple[LayoutNode, ...]:
    """Lay out ``items`` along the golden spiral, one node per item."""

    opts = options or SpiralOptions()
    validate_spiral_options(opts)

    nodes = []
    for index, item in enumerate(items):
        point = spiral_position(
            index,
            center_x=opts.center_x,
            center_y=opts.center_y,
            spread_factor=opts.spread_factor,
            zoom_level=opts.zoom_level,
            spiral_constant=opts.spiral_constant,
        )
        nodes.append(
            LayoutNode(
                item_index=index,
                x=point.x,
                y=point.y,
                angle=point.angle,
                radius=point.radius,
                key=item_key(item, index),
            )
        )

    logger.info("Spiral layout produced %d nodes (zoom=%s, spread=%s)", len(nodes), opts.zoom_level, opts.spread_factor)
    return tuple(nodes)


def orbit_slot(index: int, total: int) -> Tuple[int, float, float]:
    """Return ``(lane, radius, phase)`` for an item on the concentric orbit view."""

    index = ensure_count("index", index)
    total = ensure_count("total", total)
    if index >= total:
        raise ConfigurationError(f"index {index} out of range for {total} orbiting items")
    lane = index % ORBIT_LANES
    radius = ORBIT_RADIUS_BASE + lane * ORBIT_SPACING
    phase = (index / total) * math.pi * 2
    return lane, radius, phase


def layout_orbits(items: Sequence[Any]) -> Tuple[LayoutNode, ...]:
    """Resting positions on the orbit plane, centred on the origin."""

    total = len(items)
    nodes = []
    for index, item in enumerate(items):
        _, radius, phase = orbit_slot(index, total)
        nodes.append(
            LayoutNode(
                item_index=index,
                x=math.cos(phase) * radius,
                y=math.sin(phase) * radius,
                angle=phase,
                radius=radius,
                key=item_key(item, index),
            )
        )
    logger.info("Orbit layout produced %d nodes across %d lanes", len(nodes), min(total, ORBIT_LANES))
    return tuple(nodes)


def planetoid_position(index: int, total: int) -> Point2D:
    """Anchor of a journey planetoid in percentage space (elliptical ring)."""

    index = ensure_count("index", index)
    total = ensure_count("total", total)
    if total == 0:
        raise ConfigurationError("total must be > 0 for planetoid placement")
    angle = (index / total) * math.pi * 2 + math.pi / 4
    radius = 120 + (index % 3) * 80
    return (50 + math.cos(angle) * (radius / 5), 50 + math.sin(angle) * (radius / 8))
