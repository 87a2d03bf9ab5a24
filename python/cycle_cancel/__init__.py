"""Minimum-cost flow by cycle canceling.

Example:
    >>> from cycle_cancel import Graph, cycle_canceling
    >>> graph = Graph(3)
    >>> graph.add_edge(0, 1, 4, 1)
    >>> graph.add_edge(1, 2, 4, 1)
    >>> graph.add_edge(0, 2, 2, 5)
    >>> result = cycle_canceling(graph)
    >>> result.flow_value, result.cost
    (6, 18)

NetworkX graphs go through :mod:`cycle_cancel.nx`:
    >>> import networkx as nx
    >>> from cycle_cancel.nx import min_cost_flow
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "t", capacity=3, weight=2)
    >>> min_cost_flow(G, "s", "t")
    {'s': {'t': 3}, 't': {}}
"""

from ._version import __version__
from .augment import bottleneck_capacity, push_flow
from .cycle_canceling import (
    MinCostFlowResult,
    cycle_canceling,
    edge_flows,
    extract_optimal_graph,
    min_cost_flow_cost,
)
from .exceptions import (
    CapacityExceededError,
    CycleCancelError,
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    GraphError,
    InvalidGraphError,
    IterationLimitError,
    NegativeCapacityError,
    NegativeNodeIdError,
    NodeNotFoundError,
)
from .graph import Edge, Graph
from .max_flow import FlowResult, edmonds_karp, max_flow_value
from .negative_cycle import cycle_cost, find_negative_cycle
from .residual import build_residual_graph
from .typing import FlowDict

__all__ = [
    "CapacityExceededError",
    "CycleCancelError",
    "Edge",
    "EdgeAlreadyExistsError",
    "EdgeNotFoundError",
    "FlowDict",
    "FlowResult",
    "Graph",
    "GraphError",
    "InvalidGraphError",
    "IterationLimitError",
    "MinCostFlowResult",
    "NegativeCapacityError",
    "NegativeNodeIdError",
    "NodeNotFoundError",
    "bottleneck_capacity",
    "build_residual_graph",
    "cycle_canceling",
    "cycle_cost",
    "edge_flows",
    "edmonds_karp",
    "extract_optimal_graph",
    "find_negative_cycle",
    "max_flow_value",
    "min_cost_flow_cost",
    "push_flow",
    "__version__",
]
