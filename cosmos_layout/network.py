"""Seeded neuron placement and proximity graph construction."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from .logging_utils import apply_debug_logging
from .model import Connection, LayoutNode, NetworkOptions, NeuralNetwork, Neuron, Particle
from .seeded import check_network_seed, random_at
from .utils import dedupe_pairs, normalize_edge
from .validate import ConfigurationError, ensure_count, ensure_non_negative, validate_network_options

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
DEFAULT_MAX_DISTANCE = 35.0
DEFAULT_NEIGHBORS = 4
MIN_NEURON_SIZE = 6.0
NEURON_SIZE_RANGE = 10.0
MAX_FAN_OUT = 3


def _positions(nodes: Sequence[object]) -> np.ndarray:
    if not nodes:
        return np.zeros((0, 2), dtype=float)
    return np.asarray([(float(node.x), float(node.y)) for node in nodes], dtype=float)


def _pairwise_distances(nodes: Sequence[object]) -> np.ndarray:
    pts = _positions(nodes)
    if pts.shape[0] == 0:
        return np.zeros((0, 0), dtype=float)
    return cdist(pts, pts)


def _nearest_within(distances: np.ndarray, index: int, max_distance: float) -> List[int]:
    row = distances[index]
    order = np.argsort(row, kind="stable")
    return [int(j) for j in order if j != index and row[j] < max_distance]


def generate_nodes(count: int, seed: int = DEFAULT_SEED) -> Tuple[Neuron, ...]:
    """Place ``count`` neurons in ``[0, 100]^2``.

    Node ``i`` only reads the stateless draws at ``2i``, ``2i + 1`` and ``3i``,
    so growing ``count`` never moves existing nodes.  A seed whose draws
    would leave the exact range for ``count`` nodes is rejected before any
    node is placed (see :func:`~cosmos_layout.seeded.max_count_for_seed`).
    """

    count = ensure_count("count", count)
    seed = check_network_seed(seed, count)
    neurons = [
        Neuron(
            id=i,
            x=random_at(seed, i * 2) * 100,
            y=random_at(seed, i * 2 + 1) * 100,
            size=MIN_NEURON_SIZE + random_at(seed, i * 3) * NEURON_SIZE_RANGE,
        )
        for i in range(count)
    ]
    logger.info("Placed %d neurons with seed=%d", len(neurons), seed)
    return tuple(neurons)


def fan_out(seed: int, index: int) -> int:
    """Number of neighbours (1-3) node ``index`` reaches for."""

    return 1 + math.floor(random_at(seed, index * 4) * MAX_FAN_OUT)


def connect_neurons(
    nodes: Sequence[Neuron],
    max_distance: float = DEFAULT_MAX_DISTANCE,
    seed: int = DEFAULT_SEED,
) -> Tuple[Neuron, ...]:
    """Return copies of ``nodes`` with directed ``connections`` filled in."""

    max_distance = ensure_non_negative("max_distance", max_distance)
    seed = check_network_seed(seed, len(nodes))
    for expected, node in enumerate(nodes):
        if node.id != expected:
            raise ConfigurationError(f"neuron ids must be positional (got id {node.id} at {expected})")

    distances = _pairwise_distances(nodes)
    connected = []
    for i, node in enumerate(nodes):
        nearest = _nearest_within(distances, i, max_distance)[: fan_out(seed, i)]
        connected.append(Neuron(id=node.id, x=node.x, y=node.y, size=node.size, connections=tuple(nearest)))
    return tuple(connected)


def network_edges(neurons: Sequence[Neuron]) -> Tuple[Connection, ...]:
    """Undirected edges of already connected neurons, one per unordered pair."""

    pairs = ((neuron.id, target) for neuron in neurons for target in neuron.connections)
    return tuple(Connection(a, b) for a, b in dedupe_pairs(pairs))


def compute_edges(
    nodes: Sequence[Neuron],
    max_distance: float = DEFAULT_MAX_DISTANCE,
    seed: int = DEFAULT_SEED,
) -> Tuple[Connection, ...]:
    edges = network_edges(connect_neurons(nodes, max_distance, seed))
    logger.info("Computed %d edges for %d neurons (max_distance=%s)", len(edges), len(nodes), max_distance)
    return edges


def generate_network(
    count: int,
    seed: int = DEFAULT_SEED,
    max_distance: float = DEFAULT_MAX_DISTANCE,
) -> NeuralNetwork:
    validate_network_options(NetworkOptions(count=count, seed=seed, max_distance=max_distance))
    neurons = connect_neurons(generate_nodes(count, seed), max_distance, seed)
    return NeuralNetwork(neurons=neurons, edges=network_edges(neurons))


def nearest_neighbor_edges(nodes: Sequence[LayoutNode], k: int = DEFAULT_NEIGHBORS) -> Tuple[Connection, ...]:
    """Join every placed node to its ``k`` nearest others.

    The result is the union of each node's nearest-``k`` choices, stored once
    per unordered pair as ``(lower index, higher index)``.
    """

    k = ensure_count("k", k)
    distances = _pairwise_distances(nodes)
    pairs = []
    for i, node in enumerate(nodes):
        for j in _nearest_within(distances, i, math.inf)[:k]:
            pairs.append(normalize_edge((node.item_index, nodes[j].item_index)))
    edges = tuple(Connection(a, b) for a, b in dedupe_pairs(pairs))
    logger.info("Linked %d nodes with %d nearest-%d edges", len(nodes), len(edges), k)
    return edges


def scatter_particles(count: int) -> Tuple[Particle, ...]:
    """Fixed modular scatter used for leaves and background stars."""

    count = ensure_count("count", count)
    return tuple(
        Particle(
            id=i,
            x=float((i * 17) % 100),
            y=float((i * 23) % 100),
            size=float(4 + (i % 3) * 2),
            rotation=float((i * 37) % 360),
        )
        for i in range(count)
    )


apply_debug_logging(globals(), logger=logger)
