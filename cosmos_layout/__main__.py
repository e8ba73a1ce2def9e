import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from cosmos_layout import (
    ConfigurationError,
    SpiralOptions,
    connections_for,
    generate_forest,
    generate_network,
    get_default_options,
    layout_spiral,
    nearest_neighbor_edges,
    resolve_pattern,
    star_positions,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_ids(value: Optional[str], count: Optional[int]) -> List[str]:
    if value:
        return [part.strip() for part in value.split(",") if part.strip()]
    return [f"item-{i}" for i in range(count or 0)]


def _parse_flags(value: Optional[str], phases: int) -> List[bool]:
    if value is None:
        return [True] * phases
    flags = []
    for part in value.split(","):
        token = part.strip().lower()
        if not token:
            continue
        flags.append(token in ("1", "true", "yes", "y"))
    return flags


def _spiral(args: argparse.Namespace) -> Dict[str, Any]:
    defaults = get_default_options().spiral
    overrides = {
        name: getattr(args, name)
        for name in ("center_x", "center_y", "zoom_level", "spread_factor", "spiral_constant")
        if getattr(args, name) is not None
    }
    opts: SpiralOptions = replace(defaults, **overrides)
    ids = _parse_ids(args.ids, args.count)
    logger.info("Laying out %d item(s) on the spiral", len(ids))
    nodes = layout_spiral(ids, opts)
    payload: Dict[str, Any] = {"nodes": [node.to_dict() for node in nodes]}
    if args.neighbors:
        payload["edges"] = [edge.to_dict() for edge in nearest_neighbor_edges(nodes, args.neighbors)]
    return payload


def _tree(args: argparse.Namespace) -> Dict[str, Any]:
    defaults = get_default_options().branches
    overrides = {
        name: getattr(args, name)
        for name in ("center_x", "base_y", "branch_seed", "root_seed", "max_depth")
        if getattr(args, name) is not None
    }
    forest = generate_forest(replace(defaults, **overrides))
    logger.info("Forest has %d branch(es) and %d root(s)", len(forest.branches), len(forest.roots))
    return forest.to_dict()


def _network(args: argparse.Namespace) -> Dict[str, Any]:
    defaults = get_default_options().network
    count = args.count if args.count is not None else defaults.count
    seed = args.seed if args.seed is not None else defaults.seed
    max_distance = args.max_distance if args.max_distance is not None else defaults.max_distance
    network = generate_network(count, seed=seed, max_distance=max_distance)
    logger.info("Network has %d neuron(s) and %d edge(s)", len(network.neurons), len(network.edges))
    return network.to_dict()


def _constellation(args: argparse.Namespace) -> Dict[str, Any]:
    flags = _parse_flags(args.completed, args.phases)
    pattern = resolve_pattern(args.phases)
    stars = star_positions(args.phases, args.planet_x, args.planet_y, args.scale)
    lines = connections_for(args.phases, flags)
    logger.info("Constellation %s: %d line(s) lit", pattern.name, len(lines))
    return {
        "pattern": pattern.to_dict(),
        "stars": [{"x": x, "y": y} for x, y in stars],
        "lines": [list(pair) for pair in lines],
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate deterministic layouts as JSON")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--output",
        help="Write the JSON document to the given path instead of stdout",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    spiral = sub.add_parser("spiral", help="Golden-angle spiral placement")
    spiral.add_argument("--count", type=int, default=8, help="Number of anonymous items (default: 8)")
    spiral.add_argument("--ids", help="Comma separated item identifiers (overrides --count)")
    spiral.add_argument("--center-x", dest="center_x", type=float)
    spiral.add_argument("--center-y", dest="center_y", type=float)
    spiral.add_argument("--zoom-level", dest="zoom_level", type=float)
    spiral.add_argument("--spread-factor", dest="spread_factor", type=float)
    spiral.add_argument("--spiral-constant", dest="spiral_constant", type=float)
    spiral.add_argument(
        "--neighbors",
        type=int,
        default=0,
        help="Also emit nearest-k edges between placed items (default: off)",
    )
    spiral.set_defaults(handler=_spiral)

    tree = sub.add_parser("tree", help="Fractal branches and roots")
    tree.add_argument("--center-x", dest="center_x", type=float)
    tree.add_argument("--base-y", dest="base_y", type=float)
    tree.add_argument("--branch-seed", dest="branch_seed", type=int)
    tree.add_argument("--root-seed", dest="root_seed", type=int)
    tree.add_argument("--max-depth", dest="max_depth", type=int)
    tree.set_defaults(handler=_tree)

    network = sub.add_parser("network", help="Seeded neuron proximity graph")
    network.add_argument("--count", type=int)
    network.add_argument("--seed", type=int)
    network.add_argument("--max-distance", dest="max_distance", type=float)
    network.set_defaults(handler=_network)

    constellation = sub.add_parser("constellation", help="Constellation pattern for a phase count")
    constellation.add_argument("phases", type=int, help="Number of phases")
    constellation.add_argument(
        "--completed",
        help="Comma separated completion flags, e.g. 1,0,1 (default: all completed)",
    )
    constellation.add_argument("--planet-x", dest="planet_x", type=float, default=50.0)
    constellation.add_argument("--planet-y", dest="planet_y", type=float, default=50.0)
    constellation.add_argument("--scale", type=float, default=12.0)
    constellation.set_defaults(handler=_constellation)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        payload = args.handler(args)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(2) from exc

    document = json.dumps(payload, indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing layout to %s", output_path)
        output_path.write_text(document + "\n", encoding="utf-8")
    else:
        print(document)


if __name__ == "__main__":
    main(sys.argv[1:])
