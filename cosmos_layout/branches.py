"""Recursive fractal branch and root synthesis."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from .model import Branch, BranchOptions, Forest
from .seeded import check_seed, next_random
from .validate import ensure_count, ensure_finite, validate_branch_options

logger = logging.getLogger(__name__)

MIN_BRANCH_LENGTH = 2.0
THICKNESS_DECAY = 0.7
LENGTH_DECAY_MIN = 0.65
LENGTH_DECAY_RANGE = 0.15
ANGLE_SPREAD_BASE = 0.5
ANGLE_SPREAD_RANGE = 0.3
ANGLE_JITTER = 0.2

ROOT_ANGLE = math.pi / 2
ROOT_LENGTH = 15.0
ROOT_THICKNESS = 3.0
ROOT_MAX_DEPTH = 4

BRANCH_ANGLE = -math.pi / 2
BRANCH_LENGTH = 20.0
BRANCH_THICKNESS = 4.0
BRANCH_MAX_DEPTH = 5


def _child_count(depth: int) -> int:
    return 3 if depth < 2 else 2


def _grow(
    start_x: float,
    start_y: float,
    angle: float,
    length: float,
    thickness: float,
    depth: int,
    max_depth: int,
    id_prefix: str,
    state: int,
    out: List[Branch],
) -> int:
    if depth > max_depth or length < MIN_BRANCH_LENGTH:
        return state

    end_x = start_x + math.cos(angle) * length
    end_y = start_y + math.sin(angle) * length
    out.append(
        Branch(
            id=f"{id_prefix}-{depth}-{len(out)}",
            start_x=start_x,
            start_y=start_y,
            end_x=end_x,
            end_y=end_y,
            thickness=thickness,
            depth=depth,
        )
    )

    branch_count = _child_count(depth)
    r, state = next_random(state)
    angle_spread = ANGLE_SPREAD_BASE + r * ANGLE_SPREAD_RANGE

    # Each child draws jitter then length, and its whole subtree consumes the
    # stream before the next sibling draws.
    for i in range(branch_count):
        r, state = next_random(state)
        child_angle = angle + (i - (branch_count - 1) / 2) * angle_spread + (r - 0.5) * ANGLE_JITTER
        r, state = next_random(state)
        child_length = length * (LENGTH_DECAY_MIN + r * LENGTH_DECAY_RANGE)
        state = _grow(
            end_x,
            end_y,
            child_angle,
            child_length,
            thickness * THICKNESS_DECAY,
            depth + 1,
            max_depth,
            id_prefix,
            state,
            out,
        )
    return state


def generate_branches(
    start_x: float,
    start_y: float,
    angle: float,
    length: float,
    thickness: float,
    depth: int,
    max_depth: int,
    id_prefix: str,
    state: int,
) -> Tuple[Tuple[Branch, ...], int]:
    """Grow a branch system and return ``(branches, next_state)``.

    ``state`` is a seeded-random state (see :mod:`cosmos_layout.seeded`); the
    returned state continues the same stream, so two calls chained through it
    produce the same result as one shared generator would.
    Branches come out in pre-order (parent before children).
    """

    state = check_seed(state)
    ensure_count("depth", depth)
    ensure_count("max_depth", max_depth)
    for name, value in (("start_x", start_x), ("start_y", start_y), ("angle", angle), ("thickness", thickness)):
        ensure_finite(name, value)
    ensure_finite("length", length)

    out: List[Branch] = []
    state = _grow(start_x, start_y, angle, length, thickness, depth, max_depth, id_prefix, state, out)
    return tuple(out), state


def generate_tree(
    center_x: float,
    base_y: float,
    is_root: bool,
    state: int,
    max_depth: Optional[int] = None,
) -> Tuple[Tuple[Branch, ...], int]:
    """Grow roots (downward) or branches (upward) from ``(center_x, base_y)``."""

    if is_root:
        angle, length, thickness, depth_limit, prefix = ROOT_ANGLE, ROOT_LENGTH, ROOT_THICKNESS, ROOT_MAX_DEPTH, "root"
    else:
        angle, length, thickness, depth_limit, prefix = (
            BRANCH_ANGLE,
            BRANCH_LENGTH,
            BRANCH_THICKNESS,
            BRANCH_MAX_DEPTH,
            "branch",
        )
    if max_depth is not None:
        depth_limit = ensure_count("max_depth", max_depth)

    branches, state = generate_branches(center_x, base_y, angle, length, thickness, 0, depth_limit, prefix, state)
    logger.info(
        "Generated %d %s segments (max_depth=%d, deepest=%d)",
        len(branches),
        prefix,
        depth_limit,
        max((b.depth for b in branches), default=-1),
    )
    return branches, state


def generate_forest(options: Optional[BranchOptions] = None) -> Forest:
    """Branches and roots sharing a base point, each with its own seed."""

    opts = options or BranchOptions()
    validate_branch_options(opts)
    branches, _ = generate_tree(opts.center_x, opts.base_y, False, opts.branch_seed, opts.max_depth)
    roots, _ = generate_tree(opts.center_x, opts.base_y, True, opts.root_seed, opts.max_depth)
    return Forest(branches=branches, roots=roots)
