"""
Graph module.

Provides the graph data model and its derived views:
- GraphStore: Mutable source of truth (nodes, edges, mode flags)
- GraphSnapshot: Immutable point-in-time view used by algorithms
- build_adjacency / build_weighted_adjacency: Adjacency derivations
- GraphError / ErrorKind: Typed failures
"""

from graphsim.graph.adjacency import (
    WeightedNeighbor,
    build_adjacency,
    build_weighted_adjacency,
)
from graphsim.graph.errors import ErrorKind, GraphError
from graphsim.graph.store import Edge, GraphSnapshot, GraphStore, normalize_weight

__all__ = [
    "Edge",
    "ErrorKind",
    "GraphError",
    "GraphSnapshot",
    "GraphStore",
    "WeightedNeighbor",
    "build_adjacency",
    "build_weighted_adjacency",
    "normalize_weight",
]
