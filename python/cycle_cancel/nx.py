"""NetworkX adapter for cycle-cancel.

Converts a ``networkx.DiGraph`` with ``capacity`` and ``weight`` edge
attributes into the integer node space of the solver (source first, sink
last) and maps the resulting flow back to NetworkX's nested-dict format.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, Tuple

import math

import numpy as np

from . import _core
from .typing import FlowDict


def _integral(value: Any, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ValueError(message)
    if not math.isfinite(value) or int(value) != value:
        raise ValueError(message)
    return int(value)


def _graph_to_arrays(
    G,
    source: Hashable,
    sink: Hashable,
    *,
    capacity: str = "capacity",
    weight: str = "weight",
) -> Tuple[list, list, list, list, Dict, list]:
    if not G.is_directed():
        raise ValueError("Only directed graphs are supported.")
    if G.is_multigraph():
        raise ValueError("Parallel edges are not supported; use a DiGraph.")
    if source not in G:
        raise ValueError(f"Source node {source!r} is not in the graph.")
    if sink not in G:
        raise ValueError(f"Sink node {sink!r} is not in the graph.")
    if source == sink:
        raise ValueError("source and sink must differ.")

    nodes = [source] + [node for node in G.nodes() if node != source and node != sink] + [sink]
    index = {node: idx for idx, node in enumerate(nodes)}

    tails = []
    heads = []
    upper = []
    cost = []
    edges = list(G.edges(data=True))
    for u, v, data in edges:
        tails.append(index[u])
        heads.append(index[v])
        if capacity not in data:
            raise ValueError("Each edge must specify a finite capacity.")
        edge_capacity = _integral(data[capacity], "Each edge must specify a finite integer capacity.")
        if edge_capacity < 0:
            raise ValueError("Edge capacity must be non-negative.")
        upper.append(edge_capacity)
        cost.append(_integral(data.get(weight, 0), "Edge cost must be a finite integer."))
    return tails, heads, upper, cost, index, edges


def min_cost_flow(
    G,
    source: Hashable,
    sink: Hashable,
    *,
    capacity: str = "capacity",
    weight: str = "weight",
    max_iters: int | None = None,
    return_stats: bool = False,
) -> FlowDict | tuple[FlowDict, dict]:
    """Return a minimum-cost maximum flow from ``source`` to ``sink``.

    Args:
        G: NetworkX DiGraph with integer capacity and cost attributes.
        source: node the flow leaves from.
        sink: node the flow arrives at.
        capacity: edge attribute holding the capacity.
        weight: edge attribute holding the per-unit cost (missing means 0).
        max_iters: Maximum number of cancelled cycles.
        return_stats: When True, return (flow_dict, stats).
    """
    tails, heads, upper, cost, index, edges = _graph_to_arrays(
        G, source, sink, capacity=capacity, weight=weight
    )
    flow, stats = _core.min_cost_flow_edges_with_options(
        len(index),
        np.asarray(tails, dtype=np.int64),
        np.asarray(heads, dtype=np.int64),
        np.asarray(upper, dtype=np.int64),
        np.asarray(cost, dtype=np.int64),
        max_iters=max_iters,
    )
    flow_dict: FlowDict = {node: {} for node in G.nodes()}
    for (u, v, _data), f in zip(edges, flow.tolist()):
        flow_dict[u][v] = int(f)
    if return_stats:
        return flow_dict, stats
    return flow_dict


def max_flow_value(G, flow_dict: FlowDict, source: Hashable) -> int:
    """Net flow leaving ``source`` in ``flow_dict``."""
    outflow = sum(flow_dict.get(source, {}).values())
    inflow = sum(flow_dict.get(u, {}).get(source, 0) for u in G.predecessors(source))
    return outflow - inflow


def min_cost_flow_cost(G, flow_dict: FlowDict, *, weight: str = "weight") -> int:
    """Compute the total cost for a flow dict in NetworkX format."""
    total = 0
    for u, v, data in G.edges(data=True):
        flow = flow_dict.get(u, {}).get(v, 0)
        total += int(flow) * int(data.get(weight, 0))
    return total
