"""Maximum s-t flow with the Edmonds-Karp algorithm."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from .augment import bottleneck_capacity, push_flow
from .graph import Graph
from .residual import build_residual_graph
from .typing import Node, Path

__all__ = ["FlowResult", "edmonds_karp", "max_flow_value"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlowResult:
    """A residual graph together with the flow value that produced it."""

    graph: Graph
    value: int


def _shortest_augmenting_path(graph: Graph, source: Node, sink: Node) -> Path | None:
    parent: dict[Node, Node] = {source: source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for edge in graph.get_node_adj_list(node):
            if edge.capacity <= 0 or edge.sink in parent:
                continue
            parent[edge.sink] = node
            if edge.sink == sink:
                path = [sink]
                while path[-1] != source:
                    path.append(parent[path[-1]])
                path.reverse()
                return path
            queue.append(edge.sink)
    return None


def edmonds_karp(graph: Graph, source: Node, sink: Node) -> FlowResult:
    """Saturate ``graph`` from ``source`` to ``sink`` with BFS augmenting paths.

    Works on a fresh residual copy of ``graph`` (see
    :func:`~cycle_cancel.residual.build_residual_graph`). Each augmenting path
    is a shortest one by edge count, which bounds the run at O(V * E^2).

    Returns:
        FlowResult holding the saturated residual graph and the max-flow value.
    """
    graph.get_node_adj_list(source)
    graph.get_node_adj_list(sink)
    if source == sink:
        raise ValueError("source and sink must differ.")

    residual = build_residual_graph(graph)
    flow = 0
    augmentations = 0
    while True:
        path = _shortest_augmenting_path(residual, source, sink)
        if path is None:
            break
        amount = bottleneck_capacity(residual, path)
        push_flow(residual, path, amount)
        flow += amount
        augmentations += 1
        logger.debug("augmented %d units along %s", amount, path)

    logger.info("max flow %d -> %d: %d after %d augmentations", source, sink, flow, augmentations)
    return FlowResult(graph=residual, value=flow)


def max_flow_value(graph: Graph, source: Node, sink: Node) -> int:
    return edmonds_karp(graph, source, sink).value
