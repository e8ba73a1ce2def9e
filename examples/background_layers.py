"""Example: generate the tree and neuron background geometry."""

from cosmos_layout import generate_forest, generate_network, scatter_particles


def main() -> None:
    forest = generate_forest()
    print(f"Branches: {len(forest.branches)}, roots: {len(forest.roots)}")
    deepest = max(forest.branches, key=lambda b: b.depth)
    print(f"Deepest branch: {deepest.id} thickness={deepest.thickness:.3f}")

    network = generate_network(30, seed=42)
    print(f"Neurons: {len(network.neurons)}, synapses: {len(network.edges)}")
    for edge in network.edges[:5]:
        print(f"  {edge.key}")

    leaves = scatter_particles(8)
    print("Leaves:", [(p.x, p.y) for p in leaves])


if __name__ == "__main__":
    main()
