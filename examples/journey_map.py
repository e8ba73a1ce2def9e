"""Example: place goals on the spiral and light each goal's constellation."""

from cosmos_layout import connections_for, layout_spiral, nearest_neighbor_edges, star_positions

GOALS = [
    {"id": "learn-piano", "phases": [True, True, False, True]},
    {"id": "run-marathon", "phases": [True, True, True]},
    {"id": "write-novel", "phases": [True, False, False, False, False, False]},
    {"id": "garden", "phases": [True, True, True, True, True, True, True]},
]


def main() -> None:
    nodes = layout_spiral(GOALS)
    for node, goal in zip(nodes, GOALS):
        phases = goal["phases"]
        stars = star_positions(len(phases), node.x, node.y, scale=2.0)
        lines = connections_for(len(phases), phases)
        print(f"{node.key}: ({node.x:.2f}, {node.y:.2f}) stars={len(stars)} lit={lines}")

    print("Neighbour links:")
    for edge in nearest_neighbor_edges(nodes, k=2):
        print(f"  {nodes[edge.from_index].key} -- {nodes[edge.to_index].key}")


if __name__ == "__main__":
    main()
