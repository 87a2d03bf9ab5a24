"""Minimum-cost maximum flow by cycle canceling.

A maximum flow is computed first (Edmonds-Karp), then negative-cost cycles of
the residual network are cancelled one at a time. A flow is of minimum cost
exactly when its residual network has no negative cycle, so the loop stops at
an optimum; with integer costs every cancellation lowers the total cost by at
least one, so it always stops.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .augment import bottleneck_capacity, push_flow
from .exceptions import IterationLimitError
from .graph import Edge, Graph
from .max_flow import edmonds_karp
from .negative_cycle import find_negative_cycle

__all__ = [
    "MinCostFlowResult",
    "cycle_canceling",
    "edge_flows",
    "extract_optimal_graph",
    "min_cost_flow_cost",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MinCostFlowResult:
    """Outcome of :func:`cycle_canceling`.

    Attributes:
        residual_graph: final residual network, artificial nodes included.
        optimal_graph: one edge per original edge, capacity = flow carried.
        cost: total cost of the flow.
        flow_value: value of the maximum flow from node 0 to node n - 1.
    """

    residual_graph: Graph
    optimal_graph: Graph
    cost: int
    flow_value: int


def edge_flows(residual_graph: Graph, graph: Graph) -> dict[tuple[int, int], int]:
    """Flow carried by every edge of ``graph``, read off ``residual_graph``.

    The flow on ``u -> v`` sits on the reverse arc ``v -> u``, or on
    ``a -> u`` when the edge was split through artificial node ``a``.
    """
    split = {
        (edge.source, edge.sink): node
        for node, edge in residual_graph.artificial_nodes.items()
    }
    flows = {}
    for edge in graph.edges():
        u, v = edge.source, edge.sink
        back = split.get((u, v), v)
        # zero-capacity edges and self-loops never enter the residual network
        if edge.capacity > 0 and u != v and residual_graph.has_edge(back, u):
            flows[(u, v)] = residual_graph.get_edge(back, u).capacity
        else:
            flows[(u, v)] = 0
    return flows


def extract_optimal_graph(residual_graph: Graph, graph: Graph) -> Graph:
    """Map the final residual network back onto the original nodes.

    The result has one edge per edge of ``graph``: capacity is the flow it
    carries (0 if unused) and cost is the original cost. Neither argument is
    modified.
    """
    flows = edge_flows(residual_graph, graph)
    optimal = Graph(graph.starting_num_nodes)
    for edge in graph.edges():
        optimal.add_edge(Edge(edge.source, edge.sink, flows[(edge.source, edge.sink)], edge.cost))
    return optimal


def min_cost_flow_cost(optimal_graph: Graph) -> int:
    """Total cost of a flow assignment as returned by :func:`extract_optimal_graph`."""
    return sum(edge.capacity * edge.cost for edge in optimal_graph.edges())


def cycle_canceling(
    graph: Graph,
    *,
    max_iters: int | None = None,
    return_stats: bool = False,
) -> MinCostFlowResult | tuple[MinCostFlowResult, dict[str, Any]]:
    """Minimum-cost maximum flow from node 0 to node ``graph.num_nodes - 1``.

    Args:
        graph: network to solve; left unmodified.
        max_iters: cap on the number of cancelled cycles. ``None`` runs until
            no negative cycle remains.
        return_stats: When True, return (result, stats).

    Raises:
        IterationLimitError: ``max_iters`` cancellations did not reach an optimum.
    """
    if max_iters is not None and max_iters < 0:
        raise ValueError("max_iters must be non-negative.")

    source = 0
    sink = graph.num_nodes - 1

    max_flow = edmonds_karp(graph, source, sink)
    residual = max_flow.graph

    iterations = 0
    cycle = find_negative_cycle(residual)
    while cycle is not None:
        if max_iters is not None and iterations >= max_iters:
            raise IterationLimitError(
                f"Negative cycle still present after {iterations} cancellations."
            )
        amount = bottleneck_capacity(residual, cycle)
        push_flow(residual, cycle, amount)
        iterations += 1
        logger.debug("cancelled %d units around %s", amount, cycle)
        cycle = find_negative_cycle(residual)

    optimal = extract_optimal_graph(residual, graph)
    cost = min_cost_flow_cost(optimal)
    logger.info(
        "min cost flow: value=%d cost=%d after %d cancellations",
        max_flow.value,
        cost,
        iterations,
    )

    result = MinCostFlowResult(
        residual_graph=residual,
        optimal_graph=optimal,
        cost=cost,
        flow_value=max_flow.value,
    )
    if return_stats:
        stats = {
            "iterations": iterations,
            "max_flow": max_flow.value,
            "cost": cost,
            "artificial_nodes": len(residual.artificial_nodes),
            "termination": "optimal",
        }
        return result, stats
    return result
