"""Negative-cost cycle detection with Bellman-Ford."""
from __future__ import annotations

import logging

from .graph import Graph
from .typing import Node, Path

__all__ = ["cycle_cost", "find_negative_cycle"]

logger = logging.getLogger(__name__)


def _walk_to_cycle(pred: list[Node | None], start: Node) -> Path | None:
    seen: set[Node] = set()
    node: Node | None = start
    while node is not None and node not in seen:
        seen.add(node)
        node = pred[node]
    if node is None:
        return None

    anchor = node
    cycle = [anchor]
    node = pred[anchor]
    while node != anchor:
        cycle.append(node)
        node = pred[node]
    cycle.append(anchor)
    cycle.reverse()
    return cycle


def find_negative_cycle(graph: Graph, source: Node | None = None) -> Path | None:
    """Return one negative-cost cycle of ``graph`` or ``None``.

    Costs are relaxed over edges with positive residual capacity only. With
    ``source`` set, only cycles reachable from it are considered; otherwise
    every node starts at distance 0, as if joined to a virtual source.

    The cycle is returned in traversal order with its first node repeated at
    the end, e.g. ``[2, 5, 3, 2]``. The graph is not modified.
    """
    n = graph.num_nodes
    if source is None:
        dist: list[int | None] = [0] * n
    else:
        graph.get_node_adj_list(source)
        dist = [None] * n
        dist[source] = 0
    pred: list[Node | None] = [None] * n
    edges = [e for e in graph.edges() if e.capacity > 0]

    # n - 1 rounds settle every shortest path; a change in round n means a cycle
    last_relaxed: Node | None = None
    for _ in range(n):
        last_relaxed = None
        for edge in edges:
            d = dist[edge.source]
            if d is None:
                continue
            candidate = d + edge.cost
            if dist[edge.sink] is None or candidate < dist[edge.sink]:
                dist[edge.sink] = candidate
                pred[edge.sink] = edge.source
                last_relaxed = edge.sink
        if last_relaxed is None:
            return None

    cycle = _walk_to_cycle(pred, last_relaxed)
    if cycle is not None and logger.isEnabledFor(logging.DEBUG):
        logger.debug("negative cycle %s with cost %d", cycle, cycle_cost(graph, cycle))
    return cycle


def cycle_cost(graph: Graph, cycle: Path) -> int:
    """Total cost of the arcs along ``cycle`` (or any path)."""
    return sum(graph.get_edge(u, v).cost for u, v in zip(cycle[:-1], cycle[1:]))
