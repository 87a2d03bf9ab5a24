"""Residual network construction."""
from __future__ import annotations

import logging

from .graph import Edge, Graph

__all__ = ["build_residual_graph"]

logger = logging.getLogger(__name__)


def build_residual_graph(graph: Graph) -> Graph:
    """Return a new residual graph for ``graph``; the input is left untouched.

    Only edges with positive capacity are kept. When both ``u -> v`` and
    ``v -> u`` exist, the edge with ``u < v`` is routed through a fresh
    artificial node ``a`` as ``u -> a -> v``, so reverse arcs added during
    augmentation never collide with an original edge. Both hops keep the
    original capacity; the cost is charged once, on ``u -> a``.
    """
    residual = Graph(graph.num_nodes)

    for edge in graph.edges():
        source, sink = edge.source, edge.sink
        if edge.capacity <= 0 or source == sink:
            continue

        if source < sink and graph.has_edge(sink, source):
            artificial = residual.add_artificial_node(edge)
            residual.add_edge(source, artificial, edge.capacity, edge.cost)
            residual.add_edge(artificial, sink, edge.capacity, 0)
        else:
            residual.add_edge(Edge(source, sink, edge.capacity, edge.cost))

    if residual.artificial_nodes:
        logger.debug(
            "split %d anti-parallel edges through artificial nodes",
            len(residual.artificial_nodes),
        )
    return residual
