"""
Example: Route planning on a road network

Builds a small weighted road map as an UndirectedGraph and runs the
common queries: hop-count routes, cheapest routes, a minimum spanning
tree for laying cable along the roads, and a dense distance matrix.
"""

import numpy as np

from adjgraph import UndirectedGraph

ROADS = [
    ("Leeds", "York", 40),
    ("Leeds", "Sheffield", 55),
    ("Leeds", "Manchester", 70),
    ("York", "Hull", 60),
    ("York", "Doncaster", 55),
    ("Sheffield", "Doncaster", 30),
    ("Sheffield", "Manchester", 65),
    ("Doncaster", "Hull", 75),
]


def build_network() -> UndirectedGraph:
    network = UndirectedGraph()
    for u, v, _ in ROADS:
        network.add_vertex(u)
        network.add_vertex(v)
    for u, v, km in ROADS:
        network.add_edge(u, v, km)
    return network


def example_routes(network: UndirectedGraph):
    """Example: fewest roads versus shortest distance."""
    print("=" * 60)
    print("Example 1: Routes from Manchester to Hull")
    print("=" * 60)

    hops = network.find_shortest_path("Manchester", "Hull")
    print(f"Fewest roads:      {' -> '.join(hops)} ({len(hops) - 1} roads)")

    route = network.find_shortest_path_weighted("Manchester", "Hull")
    print(f"Shortest distance: {' -> '.join(route.path)} ({route.distance} km)")
    print()


def example_spanning_tree(network: UndirectedGraph):
    """Example: cheapest set of roads connecting every city."""
    print("=" * 60)
    print("Example 2: Minimum spanning tree")
    print("=" * 60)

    prim = network.find_minimum_spanning_tree()
    kruskal = network.find_minimum_spanning_tree_kruskal()
    for edge in kruskal.edges:
        print(f"  {edge.source} -- {edge.target}: {edge.weight} km")
    print(f"Prim total: {prim.total_weight} km, Kruskal total: {kruskal.total_weight} km")
    print()


def example_matrix(network: UndirectedGraph):
    """Example: export to a numpy adjacency matrix."""
    print("=" * 60)
    print("Example 3: Adjacency matrix")
    print("=" * 60)

    W = network.to_adjacency_matrix()
    print(f"Cities: {network.get_all_vertices()}")
    print(f"Matrix symmetric: {bool(np.array_equal(W, W.T))}")
    print(f"Density: {network.get_density():.3f}")
    print()


if __name__ == "__main__":
    network = build_network()
    print(network)
    print()
    example_routes(network)
    example_spanning_tree(network)
    example_matrix(network)
    print("Route planning complete")
