"""Flow augmentation along residual paths and cycles."""
from __future__ import annotations

from collections.abc import Sequence

from .exceptions import CapacityExceededError
from .graph import Graph
from .typing import Node

__all__ = ["bottleneck_capacity", "push_flow"]


def _pairs(path: Sequence[Node]):
    return zip(path[:-1], path[1:])


def bottleneck_capacity(graph: Graph, path: Sequence[Node]) -> int:
    """Smallest residual capacity along ``path`` (0 for fewer than two nodes)."""
    if len(path) <= 1:
        return 0
    return min(graph.get_edge(u, v).capacity for u, v in _pairs(path))


def push_flow(graph: Graph, path: Sequence[Node], amount: int) -> None:
    """Send ``amount`` units along ``path`` in the residual ``graph``.

    Each traversed arc ``u -> v`` loses ``amount`` capacity and is removed once
    it reaches zero. The opposite arc ``v -> u`` gains ``amount``; if it does
    not exist yet it is created with cost ``-cost(u -> v)``.

    Every arc is checked before the graph is touched, so a
    :class:`CapacityExceededError` leaves ``graph`` unchanged.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative.")

    edges = [graph.get_edge(u, v) for u, v in _pairs(path)]
    for edge in edges:
        if edge.capacity < amount:
            raise CapacityExceededError(edge.source, edge.sink, edge.capacity, amount)
    if amount == 0:
        return

    for u, v in _pairs(path):
        edge = graph.get_edge(u, v)
        remaining = edge.capacity - amount
        if remaining == 0:
            graph.remove_edge(u, v)
        else:
            graph.set_edge_capacity(u, v, remaining)

        if graph.has_edge(v, u):
            graph.set_edge_capacity(v, u, graph.get_edge(v, u).capacity + amount)
        else:
            graph.add_edge(v, u, amount, -edge.cost)
