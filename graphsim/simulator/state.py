"""
Command result records returned across the simulator boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from graphsim.graph.errors import ErrorKind, GraphError

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"
STATUS_INFO = "info"


@dataclass
class CommandResult:
    """
    Outcome of one user command.

    Attributes:
        command: Command name (e.g. "add_edge", "run_bfs")
        ok: Whether the command succeeded
        message: Status line for the UI
        level: "success", "error" or "info" (status styling)
        error: Failure kind when ok is False
        payload: Command-specific output (Edge, TraversalResult, PathResult,
            TopoResult, or None)
        frames: Number of animation frames scheduled by this command
        timestamp: When the command completed
    """

    command: str
    ok: bool
    message: str
    level: str = STATUS_SUCCESS
    error: ErrorKind | None = None
    payload: Any = None
    frames: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def success(
        cls,
        command: str,
        message: str,
        payload: Any = None,
        frames: int = 0,
        level: str = STATUS_SUCCESS,
    ) -> CommandResult:
        return cls(
            command=command,
            ok=True,
            message=message,
            level=level,
            payload=payload,
            frames=frames,
        )

    @classmethod
    def failure(cls, command: str, error: GraphError) -> CommandResult:
        return cls(
            command=command,
            ok=False,
            message=error.message,
            level=STATUS_ERROR,
            error=error.kind,
        )
