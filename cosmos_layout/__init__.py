from .model import (
    Branch,
    BranchOptions,
    ConstellationPattern,
    Connection,
    Forest,
    LayoutNode,
    LayoutOptions,
    NetworkOptions,
    NeuralNetwork,
    Neuron,
    Particle,
    PointConnection,
    SpiralOptions,
    SpiralPoint,
)
from .validate import ConfigurationError, SeedRangeError
from .seeded import (
    MAX_SAFE_SEED,
    SeededRandom,
    check_network_seed,
    check_seed,
    max_count_for_seed,
    next_random,
    random_at,
    seed_from_identifier,
)
from .spiral import (
    GOLDEN_ANGLE,
    circular_position,
    layout_orbits,
    layout_spiral,
    orbit_slot,
    planetoid_position,
    spiral_position,
)
from .branches import MIN_BRANCH_LENGTH, generate_branches, generate_forest, generate_tree
from .network import (
    compute_edges,
    connect_neurons,
    generate_network,
    generate_nodes,
    nearest_neighbor_edges,
    network_edges,
    scatter_particles,
)
from .constellation import (
    CONSTELLATION_PATTERNS,
    ConstellationKind,
    connections_for,
    kind_for,
    lit_segments,
    resolve_pattern,
    star_positions,
    vision_pattern,
)
from .cache import LayoutCache
from .config import get_default_options, reset_default_options, set_default_options

__all__ = [
    'Branch',
    'BranchOptions',
    'ConstellationPattern',
    'Connection',
    'Forest',
    'LayoutNode',
    'LayoutOptions',
    'NetworkOptions',
    'NeuralNetwork',
    'Neuron',
    'Particle',
    'PointConnection',
    'SpiralOptions',
    'SpiralPoint',
    'ConfigurationError',
    'SeedRangeError',
    'MAX_SAFE_SEED',
    'SeededRandom',
    'check_network_seed',
    'check_seed',
    'max_count_for_seed',
    'next_random',
    'random_at',
    'seed_from_identifier',
    'GOLDEN_ANGLE',
    'circular_position',
    'layout_orbits',
    'layout_spiral',
    'orbit_slot',
    'planetoid_position',
    'spiral_position',
    'MIN_BRANCH_LENGTH',
    'generate_branches',
    'generate_forest',
    'generate_tree',
    'compute_edges',
    'connect_neurons',
    'generate_network',
    'generate_nodes',
    'nearest_neighbor_edges',
    'network_edges',
    'scatter_particles',
    'CONSTELLATION_PATTERNS',
    'ConstellationKind',
    'connections_for',
    'kind_for',
    'lit_segments',
    'resolve_pattern',
    'star_positions',
    'vision_pattern',
    'LayoutCache',
    'get_default_options',
    'reset_default_options',
    'set_default_options',
]
