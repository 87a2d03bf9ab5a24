"""Exception hierarchy for cycle-cancel.

Graph and augmentation errors subclass :class:`ValueError` so callers that
only care about "bad input" can catch that.
"""
from __future__ import annotations


class CycleCancelError(Exception):
    """Base class for every error raised by this package."""


class GraphError(CycleCancelError, ValueError):
    """Invalid operation on a :class:`~cycle_cancel.graph.Graph`."""


class NodeNotFoundError(GraphError):
    """Referenced node id is not below the current node count."""

    def __init__(self, node: int) -> None:
        super().__init__(f"Node {node} does not exist.")
        self.node = node


class NegativeNodeIdError(GraphError):
    """Node ids must be non-negative."""

    def __init__(self, node: int) -> None:
        super().__init__(f"Node id {node} is negative.")
        self.node = node


class EdgeNotFoundError(GraphError):
    def __init__(self, source: int, sink: int) -> None:
        super().__init__(f"No edge between node {source} and node {sink}.")
        self.source = source
        self.sink = sink


class EdgeAlreadyExistsError(GraphError):
    def __init__(self, source: int, sink: int) -> None:
        super().__init__(f"The edge {source} -> {sink} already exists.")
        self.source = source
        self.sink = sink


class NegativeCapacityError(GraphError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"Capacity must be non-negative, got {capacity}.")
        self.capacity = capacity


class InvalidGraphError(GraphError):
    """Structured graph input is malformed."""


class CapacityExceededError(CycleCancelError, ValueError):
    """Requested flow is larger than the residual capacity of an edge."""

    def __init__(self, source: int, sink: int, capacity: int, amount: int) -> None:
        super().__init__(
            f"Cannot push {amount} units on {source} -> {sink}: "
            f"residual capacity is {capacity}."
        )
        self.source = source
        self.sink = sink
        self.capacity = capacity
        self.amount = amount


class IterationLimitError(CycleCancelError, RuntimeError):
    """Cycle canceling did not converge within ``max_iters`` cancellations."""


__all__ = [
    "CapacityExceededError",
    "CycleCancelError",
    "EdgeAlreadyExistsError",
    "EdgeNotFoundError",
    "GraphError",
    "InvalidGraphError",
    "IterationLimitError",
    "NegativeCapacityError",
    "NegativeNodeIdError",
    "NodeNotFoundError",
]
