"""
Algorithms module.

Provides the graph algorithm engines:
- bfs / dfs: Traversals with animation levels
- shortest_path: BFS or Dijkstra, selected by edge weights
- topological_sort: Kahn's algorithm with step snapshots
"""

from graphsim.algorithms.results import PathResult, TopoResult, TopoStep, TraversalResult
from graphsim.algorithms.shortest_path import (
    bfs_shortest_path,
    dijkstra,
    select_strategy,
    shortest_path,
)
from graphsim.algorithms.topological import topological_sort
from graphsim.algorithms.traversal import bfs, dfs

__all__ = [
    "PathResult",
    "TopoResult",
    "TopoStep",
    "TraversalResult",
    "bfs",
    "bfs_shortest_path",
    "dfs",
    "dijkstra",
    "select_strategy",
    "shortest_path",
    "topological_sort",
]
