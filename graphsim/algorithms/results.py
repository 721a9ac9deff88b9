"""
Result records produced by the algorithm engines.

These are handed to the reporting collaborator as-is, and their
`levels` are handed to the animation scheduler.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TraversalResult:
    """
    Outcome of a BFS or DFS traversal.

    Attributes:
        algorithm: "bfs" or "dfs"
        start: Start node label
        order: Flat visitation order
        levels: Node groups that animate together (BFS distance layers,
            or one singleton per visited node for DFS)
    """

    algorithm: str
    start: str
    order: list[str]
    levels: list[list[str]]


@dataclass
class PathResult:
    """
    Outcome of a shortest-path query.

    Attributes:
        start: Source node
        end: Destination node
        path: Nodes from start to end inclusive
        cost: Number of edges (BFS) or summed weight (Dijkstra)
        strategy: Strategy that produced the path, STRATEGY_BFS ("bfs") or
            STRATEGY_DIJKSTRA ("dijkstra"). None exactly when start == end:
            the trivial path [start] with cost 0 is returned before either
            strategy runs, so no strategy is reported.
    """

    start: str
    end: str
    path: list[str]
    cost: int
    strategy: str | None

    @property
    def is_trivial(self) -> bool:
        """Whether start and end are the same node."""
        return self.start == self.end

    @property
    def levels(self) -> list[list[str]]:
        """One animation frame per path node."""
        return [[node] for node in self.path]


@dataclass
class TopoStep:
    """
    Snapshot taken right after Kahn's algorithm removes a node.

    Attributes:
        removed_node: Node appended to the order in this step
        indegree_snapshot: Full indegree table after the removal
        queue_snapshot: Zero-indegree queue contents after the removal
    """

    removed_node: str
    indegree_snapshot: dict[str, int]
    queue_snapshot: list[str]


@dataclass
class TopoResult:
    """
    Outcome of a successful topological sort.

    Attributes:
        order: A valid topological order
        initial_indegree: Indegree table before any removal
        steps: One TopoStep per removed node
    """

    order: list[str]
    initial_indegree: dict[str, int]
    steps: list[TopoStep] = field(default_factory=list)

    @property
    def levels(self) -> list[list[str]]:
        """One animation frame per removed node."""
        return [[node] for node in self.order]
