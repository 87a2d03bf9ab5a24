"""Array-based entry point for the cycle-canceling solver.

Edges are given as parallel integer arrays; node 0 is the source and node
``n - 1`` the sink.
"""
from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from ._version import __version__
from .cycle_canceling import cycle_canceling, edge_flows
from .graph import Graph

__all__ = ["min_cost_flow_edges", "min_cost_flow_edges_with_options", "__version__"]


def _as_int64_array(values: Iterable[int], name: str) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array")
    if array.size and not np.issubdtype(array.dtype, np.integer):
        if not np.all(np.isfinite(array)) or np.any(array != np.round(array)):
            raise ValueError(f"{name} must contain integers")
    return array.astype(np.int64)


def _build_graph(
    n: int,
    tail: Iterable[int],
    head: Iterable[int],
    capacity: Iterable[int],
    cost: Iterable[int],
) -> tuple[Graph, np.ndarray, np.ndarray]:
    if n < 2:
        raise ValueError("n must be at least 2")

    tail_arr = _as_int64_array(tail, "tail")
    head_arr = _as_int64_array(head, "head")
    capacity_arr = _as_int64_array(capacity, "capacity")
    cost_arr = _as_int64_array(cost, "cost")

    edge_count = len(tail_arr)
    if len(head_arr) != edge_count:
        raise ValueError("tail and head arrays must match length")
    if len(capacity_arr) != edge_count or len(cost_arr) != edge_count:
        raise ValueError("edge attribute arrays must match tail/head length")

    if np.any(tail_arr < 0) or np.any(tail_arr >= n):
        raise ValueError("tail index out of range")
    if np.any(head_arr < 0) or np.any(head_arr >= n):
        raise ValueError("head index out of range")
    if np.any(capacity_arr < 0):
        raise ValueError("capacity must be non-negative")

    graph = Graph(int(n))
    for u, v, cap, c in zip(tail_arr.tolist(), head_arr.tolist(), capacity_arr.tolist(), cost_arr.tolist()):
        graph.add_edge(u, v, cap, c)
    return graph, tail_arr, head_arr


def min_cost_flow_edges_with_options(
    n: int,
    tail: Iterable[int],
    head: Iterable[int],
    capacity: Iterable[int],
    cost: Iterable[int],
    *,
    max_iters: int | None = None,
) -> tuple[np.ndarray, dict[str, Any]]:
    """Like :func:`min_cost_flow_edges` but also returns solver stats."""
    graph, tail_arr, head_arr = _build_graph(n, tail, head, capacity, cost)
    result, stats = cycle_canceling(graph, max_iters=max_iters, return_stats=True)
    flows_by_pair = edge_flows(result.residual_graph, graph)
    flows = np.zeros(len(tail_arr), dtype=np.int64)
    for idx, (u, v) in enumerate(zip(tail_arr.tolist(), head_arr.tolist())):
        flows[idx] = flows_by_pair[(u, v)]
    return flows, stats


def min_cost_flow_edges(
    n: int,
    tail: Iterable[int],
    head: Iterable[int],
    capacity: Iterable[int],
    cost: Iterable[int],
) -> np.ndarray:
    """Per-edge flow of a minimum-cost maximum flow from node 0 to node n - 1."""
    flows, _stats = min_cost_flow_edges_with_options(n, tail, head, capacity, cost)
    return flows
