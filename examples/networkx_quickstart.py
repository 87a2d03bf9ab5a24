"""Quickstart example for cycle-cancel with NetworkX."""
import networkx as nx

from cycle_cancel.nx import min_cost_flow, min_cost_flow_cost


def main() -> None:
    graph = nx.DiGraph()
    graph.add_edge("s", "a", capacity=3, weight=1)
    graph.add_edge("a", "t", capacity=2, weight=1)
    graph.add_edge("s", "b", capacity=2, weight=2)
    graph.add_edge("b", "t", capacity=3, weight=1)

    flow = min_cost_flow(graph, "s", "t")
    print("flow:", flow)
    print("cost:", min_cost_flow_cost(graph, flow))


if __name__ == "__main__":
    main()
