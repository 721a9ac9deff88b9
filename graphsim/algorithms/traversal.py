"""
Traversal engine: level-grouped BFS and deterministic iterative DFS.
"""

from __future__ import annotations

import logging
from collections import deque

from graphsim.algorithms.results import TraversalResult
from graphsim.graph.adjacency import build_adjacency
from graphsim.graph.errors import ErrorKind, GraphError
from graphsim.graph.store import GraphSnapshot, GraphStore

logger = logging.getLogger(__name__)


def _require_start(adj: dict, start: str) -> None:
    if start not in adj:
        raise GraphError(
            ErrorKind.UNKNOWN_START_NODE,
            f"Start node '{start}' is not in the graph.",
        )


def bfs(graph: GraphStore | GraphSnapshot, start: str) -> TraversalResult:
    """
    Breadth-first traversal grouped into distance levels.

    The queue is drained in batches equal to its size at the start of each
    round; each batch is one level. Neighbors are enqueued in adjacency
    order (first edge introducing the neighbor wins).

    Raises:
        GraphError: UNKNOWN_START_NODE
    """
    adj = build_adjacency(graph)
    _require_start(adj, start)

    visited = {start}
    queue = deque([start])
    order: list[str] = []
    levels: list[list[str]] = []

    while queue:
        level: list[str] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            order.append(node)
            level.append(node)
            for neighbor in adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        logger.debug(f"BFS level {len(levels)}: {level}")
        levels.append(level)

    return TraversalResult(algorithm="bfs", start=start, order=order, levels=levels)


def dfs(graph: GraphStore | GraphSnapshot, start: str) -> TraversalResult:
    """
    Depth-first traversal with an explicit stack.

    Neighbors are pushed in reverse lexicographic order so that they pop,
    and are therefore visited, in ascending lexicographic order regardless
    of edge insertion order. A node may sit on the stack several times;
    it is visited only on its first pop.

    Raises:
        GraphError: UNKNOWN_START_NODE
    """
    adj = build_adjacency(graph)
    _require_start(adj, start)

    visited: set[str] = set()
    stack = [start]
    order: list[str] = []

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for neighbor in sorted(adj[node], reverse=True):
            if neighbor not in visited:
                stack.append(neighbor)

    return TraversalResult(
        algorithm="dfs",
        start=start,
        order=order,
        levels=[[node] for node in order],
    )
