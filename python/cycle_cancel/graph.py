"""Directed graph with per-edge capacity and cost.

Nodes are the integers ``0 .. num_nodes - 1``. The first
``starting_num_nodes`` ids are the caller's nodes; ids appended later are
artificial nodes created while building a residual network, each standing in
for one original edge (see :meth:`Graph.add_artificial_node`).

Example:
    >>> from cycle_cancel.graph import Graph
    >>> graph = Graph(3)
    >>> graph.add_edge(0, 1, 4, 2)
    >>> graph.add_edge(1, 2, 3, 1)
    >>> graph.get_edge(0, 1)
    Edge(source=0, sink=1, capacity=4, cost=2)
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

from .exceptions import (
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    InvalidGraphError,
    NegativeCapacityError,
    NegativeNodeIdError,
    NodeNotFoundError,
)
from .typing import EdgeTuple, Node

__all__ = ["Edge", "Graph"]


@dataclass(frozen=True)
class Edge:
    source: Node
    sink: Node
    capacity: int
    cost: int

    def with_capacity(self, capacity: int) -> "Edge":
        return replace(self, capacity=capacity)

    def with_cost(self, cost: int) -> "Edge":
        return replace(self, cost=cost)

    def as_tuple(self) -> EdgeTuple:
        return (self.source, self.sink, self.capacity, self.cost)


class Graph:
    """Adjacency-list directed graph holding at most one edge per ordered pair."""

    def __init__(self, num_nodes: int) -> None:
        if isinstance(num_nodes, bool) or not isinstance(num_nodes, int) or num_nodes < 1:
            raise InvalidGraphError("num_nodes must be a positive integer.")
        self._starting_num_nodes = num_nodes
        self._adj: dict[Node, dict[Node, Edge]] = {node: {} for node in range(num_nodes)}
        self._artificial: dict[Node, Edge] = {}

    # ------------------------------------------------------------ construction

    @classmethod
    def from_edges(cls, num_nodes: int, edges: Iterable[Edge | EdgeTuple]) -> "Graph":
        graph = cls(num_nodes)
        for edge in edges:
            graph.add_edge(edge)
        return graph

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        """Build a graph from ``{"Num_nodes": n, "Edges": [{Source, Sink, Capacity, Weight}]}``."""
        try:
            num_nodes = data["Num_nodes"]
            raw_edges = data["Edges"]
        except KeyError as exc:
            raise InvalidGraphError(f"Missing field {exc.args[0]!r}.") from exc
        except TypeError as exc:
            raise InvalidGraphError("Graph data must be a mapping.") from exc

        graph = cls(num_nodes)
        for idx, raw in enumerate(raw_edges):
            try:
                source = raw["Source"]
                sink = raw["Sink"]
                capacity = raw["Capacity"]
                cost = raw["Weight"]
            except (KeyError, TypeError) as exc:
                raise InvalidGraphError(f"Edge #{idx} is malformed: {raw!r}.") from exc
            for name, value in (("Source", source), ("Sink", sink), ("Capacity", capacity), ("Weight", cost)):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise InvalidGraphError(f"Edge #{idx} field {name} must be an integer.")
            graph.add_edge(source, sink, capacity, cost)
        return graph

    def to_dict(self) -> dict[str, Any]:
        return {
            "Num_nodes": self.num_nodes,
            "Edges": [
                {"Source": e.source, "Sink": e.sink, "Capacity": e.capacity, "Weight": e.cost}
                for e in self.edges()
            ],
        }

    def copy(self) -> "Graph":
        other = Graph(self._starting_num_nodes)
        other._adj = {node: dict(adj) for node, adj in self._adj.items()}
        other._artificial = dict(self._artificial)
        return other

    # ------------------------------------------------------------ properties

    @property
    def starting_num_nodes(self) -> int:
        return self._starting_num_nodes

    @property
    def num_nodes(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        return sum(len(adj) for adj in self._adj.values())

    @property
    def artificial_nodes(self) -> Mapping[Node, Edge]:
        """Read-only view of artificial node -> the original edge it splits."""
        return MappingProxyType(self._artificial)

    # ------------------------------------------------------------ queries

    def get_node_adj_list(self, node: Node) -> list[Edge]:
        self._check_node(node)
        return list(self._adj[node].values())

    def edges(self) -> Iterator[Edge]:
        for node in range(self.num_nodes):
            yield from self._adj[node].values()

    def has_edge(self, source: Node, sink: Node) -> bool:
        self._check_node(source)
        self._check_node(sink)
        return sink in self._adj[source]

    def get_edge(self, source: Node, sink: Node) -> Edge:
        self._check_node(source)
        self._check_node(sink)
        try:
            return self._adj[source][sink]
        except KeyError:
            raise EdgeNotFoundError(source, sink) from None

    def is_artificial(self, node: Node) -> bool:
        self._check_node(node)
        return node in self._artificial

    def get_artificial_edge(self, node: Node) -> Edge:
        if not self.is_artificial(node):
            raise NodeNotFoundError(node)
        return self._artificial[node]

    # ------------------------------------------------------------ mutation

    def set_edge_capacity(self, source: Node, sink: Node, capacity: int) -> None:
        edge = self.get_edge(source, sink)
        self._check_capacity(capacity)
        self._adj[source][sink] = edge.with_capacity(capacity)

    def set_edge_cost(self, source: Node, sink: Node, cost: int) -> None:
        edge = self.get_edge(source, sink)
        self._adj[source][sink] = edge.with_cost(cost)

    def add_edge(
        self,
        source: Node | Edge | EdgeTuple,
        sink: Node | None = None,
        capacity: int | None = None,
        cost: int | None = None,
    ) -> None:
        """Add ``source -> sink``; accepts an :class:`Edge`, a 4-tuple or four ints."""
        if sink is None:
            edge = source if isinstance(source, Edge) else Edge(*source)
        else:
            if capacity is None or cost is None:
                raise TypeError("add_edge() needs capacity and cost.")
            edge = Edge(source, sink, capacity, cost)

        self._check_node(edge.source)
        self._check_node(edge.sink)
        self._check_capacity(edge.capacity)
        if edge.sink in self._adj[edge.source]:
            raise EdgeAlreadyExistsError(edge.source, edge.sink)
        self._adj[edge.source][edge.sink] = edge

    def remove_edge(self, source: Node, sink: Node) -> None:
        self.get_edge(source, sink)
        del self._adj[source][sink]

    def add_artificial_node(self, represented_edge: Edge) -> Node:
        """Append a node standing in for ``represented_edge`` and return its id.

        The node starts without edges; the caller wires it in.
        """
        node = self.num_nodes
        self._adj[node] = {}
        self._artificial[node] = represented_edge
        return node

    # ------------------------------------------------------------ helpers

    def _check_node(self, node: Node) -> None:
        if node < 0:
            raise NegativeNodeIdError(node)
        if node >= self.num_nodes:
            raise NodeNotFoundError(node)

    @staticmethod
    def _check_capacity(capacity: int) -> None:
        if capacity < 0:
            raise NegativeCapacityError(capacity)

    # ------------------------------------------------------------ dunder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.num_nodes == other.num_nodes
            and self.starting_num_nodes == other.starting_num_nodes
            and sorted(e.as_tuple() for e in self.edges()) == sorted(e.as_tuple() for e in other.edges())
            and self._artificial == other._artificial
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(num_nodes={self.num_nodes}, edges={self.num_edges}, "
            f"artificial={len(self._artificial)})"
        )

    def to_string(self) -> str:
        lines = []
        for node in range(self.num_nodes):
            targets = ", ".join(
                f"{e.sink} (capacity={e.capacity}, cost={e.cost})" for e in self._adj[node].values()
            )
            marker = "*" if node in self._artificial else ""
            lines.append(f"{node}{marker}: [{targets}]")
        return "\n".join(lines)
