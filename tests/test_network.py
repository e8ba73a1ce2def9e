import math

import pytest

from cosmos_layout import ConfigurationError, Connection, LayoutNode, Neuron, SeedRangeError, layout_spiral
from cosmos_layout.network import (
    compute_edges,
    connect_neurons,
    fan_out,
    generate_network,
    generate_nodes,
    nearest_neighbor_edges,
    network_edges,
    scatter_particles,
)
from cosmos_layout.seeded import max_count_for_seed, random_at


def _pair_set(edges):
    return [tuple(sorted(edge.as_pair())) for edge in edges]


def test_node_placement_uses_stateless_draws():
    nodes = generate_nodes(3, seed=42)
    assert [n.id for n in nodes] == [0, 1, 2]
    assert nodes[1].x == pytest.approx(random_at(42, 2) * 100)
    assert nodes[1].y == pytest.approx(random_at(42, 3) * 100)
    assert nodes[1].size == pytest.approx(6 + random_at(42, 3) * 10)
    assert all(n.connections == () for n in nodes)


def test_nodes_stable_under_growth():
    small = generate_nodes(5, seed=7)
    large = generate_nodes(10, seed=7)
    assert small[2] == large[2]
    assert small == large[:5]


def test_large_seed_rejected_before_placement(monkeypatch):
    seed = 5 * 10**10
    assert len(generate_nodes(5, seed)) == 5

    draws = []
    monkeypatch.setattr("cosmos_layout.network.random_at", lambda *a: draws.append(a) or 0.5)
    with pytest.raises(SeedRangeError, match="at most 5"):
        generate_nodes(10, seed)
    assert draws == []


def test_large_seed_rejected_for_connect_and_network():
    seed = 5 * 10**10
    nodes = tuple(Neuron(id=i, x=float(i), y=0.0, size=6) for i in range(max_count_for_seed(seed) + 1))
    with pytest.raises(SeedRangeError):
        connect_neurons(nodes, seed=seed)
    with pytest.raises(SeedRangeError):
        generate_network(30, seed=10**10)
    assert len(connect_neurons(nodes[:-1], seed=seed)) == len(nodes) - 1


def test_nodes_stable_under_growth_up_to_seed_limit():
    seed = 5 * 10**10
    limit = max_count_for_seed(seed)
    assert generate_nodes(limit, seed)[:3] == generate_nodes(3, seed)


def test_nodes_within_bounds():
    for node in generate_nodes(100):
        assert 0 <= node.x < 100
        assert 0 <= node.y < 100
        assert 6 <= node.size < 16


def test_negative_count_rejected():
    with pytest.raises(ConfigurationError):
        generate_nodes(-1)
    with pytest.raises(ConfigurationError):
        generate_network(3, max_distance=-1)


@pytest.mark.parametrize("count", [0, 1, 2, 10, 50, 120, 200])
def test_edges_have_no_self_loops_or_duplicates(count):
    edges = compute_edges(generate_nodes(count))
    pairs = _pair_set(edges)
    assert all(a != b for a, b in pairs)
    assert len(pairs) == len(set(pairs))


def test_connections_respect_fan_out_and_distance():
    nodes = connect_neurons(generate_nodes(40, seed=3), max_distance=35, seed=3)
    for i, node in enumerate(nodes):
        assert len(node.connections) <= fan_out(3, i)
        assert 1 <= fan_out(3, i) <= 3
        dists = [math.hypot(node.x - nodes[j].x, node.y - nodes[j].y) for j in node.connections]
        assert all(d < 35 for d in dists)
        assert dists == sorted(dists)
        assert i not in node.connections


def test_connections_pick_nearest_first():
    nodes = (
        Neuron(id=0, x=0.0, y=0.0, size=6),
        Neuron(id=1, x=10.0, y=0.0, size=6),
        Neuron(id=2, x=3.0, y=0.0, size=6),
        Neuron(id=3, x=90.0, y=90.0, size=6),
    )
    connected = connect_neurons(nodes, max_distance=35, seed=42)
    assert connected[0].connections[0] == 2
    assert connected[3].connections == ()


def test_zero_distance_threshold_gives_no_edges():
    assert compute_edges(generate_nodes(20), max_distance=0) == ()


def test_edge_keys_sort_numerically():
    assert Connection(10, 9).key == "9-10"
    neurons = (
        Neuron(id=0, x=0, y=0, size=6, connections=(1,)),
        Neuron(id=1, x=1, y=0, size=6, connections=(0,)),
    )
    assert network_edges(neurons) == (Connection(0, 1),)


def test_generate_network_matches_two_step_pipeline():
    network = generate_network(30, seed=42)
    nodes = generate_nodes(30, seed=42)
    assert network.edges == compute_edges(nodes, 35, 42)
    assert [n.id for n in network.neurons] == list(range(30))
    payload = network.to_dict()
    assert len(payload["neurons"]) == 30
    assert all(isinstance(n["connections"], list) for n in payload["neurons"])


def test_non_positional_ids_rejected():
    nodes = (Neuron(id=5, x=0, y=0, size=6),)
    with pytest.raises(ConfigurationError):
        connect_neurons(nodes)


def test_nearest_neighbor_edges_on_spiral():
    nodes = layout_spiral([f"goal-{i}" for i in range(8)])
    edges = nearest_neighbor_edges(nodes, k=4)
    pairs = [edge.as_pair() for edge in edges]
    assert all(a < b for a, b in pairs)
    assert len(pairs) == len(set(pairs))
    for node in nodes:
        degree = sum(1 for a, b in pairs if node.item_index in (a, b))
        assert degree >= 4


def test_nearest_neighbor_edges_small_inputs():
    assert nearest_neighbor_edges([]) == ()
    single = (LayoutNode(item_index=0, x=1, y=1, angle=0, radius=1),)
    assert nearest_neighbor_edges(single) == ()
    pair = single + (LayoutNode(item_index=1, x=2, y=2, angle=0, radius=1),)
    assert nearest_neighbor_edges(pair) == (Connection(0, 1),)
    assert nearest_neighbor_edges(pair, k=0) == ()


def test_scatter_particles():
    particles = scatter_particles(4)
    assert [(p.x, p.y, p.size, p.rotation) for p in particles] == [
        (0.0, 0.0, 4.0, 0.0),
        (17.0, 23.0, 6.0, 37.0),
        (34.0, 46.0, 8.0, 74.0),
        (51.0, 69.0, 4.0, 111.0),
    ]
