"""Example usage of the integer-graph API on a grid network."""
from __future__ import annotations

from cycle_cancel import Graph, cycle_canceling


def build_grid_graph(size: int = 5) -> Graph:
    """Grid with rightward/downward edges plus cheaper upward/leftward detours."""
    graph = Graph(size * size)
    for i in range(size):
        for j in range(size):
            node = i * size + j
            if i + 1 < size:
                graph.add_edge(node, node + size, 3, 2)
            if j + 1 < size:
                graph.add_edge(node, node + 1, 3, 1 + (i % 2))
            if i > 0 and j > 0:
                graph.add_edge(node, node - 1, 1, 1)
    return graph


def main() -> None:
    graph = build_grid_graph()
    result, stats = cycle_canceling(graph, return_stats=True)
    print("max flow:", result.flow_value)
    print("cost:", result.cost)
    print("cancelled cycles:", stats["iterations"])
    print("artificial nodes:", stats["artificial_nodes"])
    print(result.optimal_graph.to_string())


if __name__ == "__main__":
    main()
