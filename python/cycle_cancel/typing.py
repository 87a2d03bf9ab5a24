"""Type aliases for the cycle-cancel public API."""
from __future__ import annotations

from typing import Dict, Hashable, List, Tuple

Node = int
Cost = int
Capacity = int
FlowValue = int

Path = List[Node]
NodePair = Tuple[Node, Node]
EdgeTuple = Tuple[Node, Node, Capacity, Cost]

FlowDict = Dict[Hashable, Dict[Hashable, FlowValue]]

__all__ = [
    "Capacity",
    "Cost",
    "EdgeTuple",
    "FlowDict",
    "FlowValue",
    "Node",
    "NodePair",
    "Path",
]
