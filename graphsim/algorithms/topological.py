"""
Topological engine: Kahn's algorithm with per-step snapshots.
"""

from __future__ import annotations

import logging
from collections import deque

from graphsim.algorithms.results import TopoResult, TopoStep
from graphsim.graph.errors import ErrorKind, GraphError
from graphsim.graph.store import GraphSnapshot, GraphStore

logger = logging.getLogger(__name__)


def topological_sort(graph: GraphStore | GraphSnapshot) -> TopoResult:
    """
    Order the nodes of a directed acyclic graph.

    The queue is seeded with zero-indegree nodes in node-insertion order;
    out-neighbors are decremented in edge-insertion order. After every
    removal the full indegree table and the queue are recorded.

    Raises:
        GraphError: REQUIRES_DIRECTED in undirected mode, CYCLIC_GRAPH if
            not every node could be removed
    """
    snap = graph.snapshot()
    if not snap.directed:
        raise GraphError(
            ErrorKind.REQUIRES_DIRECTED,
            "Topological Sort only works for Directed Acyclic Graphs!",
        )

    adj: dict[str, list[str]] = {node: [] for node in snap.nodes}
    indegree: dict[str, int] = {node: 0 for node in snap.nodes}
    for edge in snap.edges:
        adj[edge.source].append(edge.target)
        indegree[edge.target] += 1

    initial_indegree = dict(indegree)
    queue = deque(node for node, degree in indegree.items() if degree == 0)
    order: list[str] = []
    steps: list[TopoStep] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adj[node]:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)
        steps.append(
            TopoStep(
                removed_node=node,
                indegree_snapshot=dict(indegree),
                queue_snapshot=list(queue),
            )
        )
        logger.debug(f"Removed {node}; queue now {list(queue)}")

    if len(order) != len(snap.nodes):
        raise GraphError(
            ErrorKind.CYCLIC_GRAPH,
            "Graph has cycle. No topo order.",
        )

    return TopoResult(order=order, initial_indegree=initial_indegree, steps=steps)
