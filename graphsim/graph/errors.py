"""
Error kinds raised by the graph store and the algorithm engines.

Every failure is a recoverable, user-input-level condition. The command
boundary (GraphSimulator) turns a GraphError into a CommandResult.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Discrete failure kinds surfaced to the UI."""

    EMPTY_LABEL = "EmptyLabel"
    DUPLICATE_NODE = "DuplicateNode"
    INSUFFICIENT_NODES = "InsufficientNodes"
    INVALID_ENDPOINT = "InvalidEndpoint"
    SELF_LOOP = "SelfLoop"
    DUPLICATE_EDGE = "DuplicateEdge"
    UNKNOWN_START_NODE = "UnknownStartNode"
    NO_PATH = "NoPath"
    REQUIRES_DIRECTED = "RequiresDirected"
    CYCLIC_GRAPH = "CyclicGraph"


class GraphError(ValueError):
    """
    Raised when a graph command or algorithm cannot proceed.

    Attributes:
        kind: The ErrorKind identifying the failure
        message: Human-readable status text
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"GraphError({self.kind.value}, {self.message!r})"
