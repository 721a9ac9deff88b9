"""
Simulator module.

Provides the command boundary consumed by a UI:
- GraphSimulator: Validates commands, runs algorithms, drives animation
- CommandResult: Typed outcome of every command
"""

from graphsim.simulator.engine import GraphSimulator
from graphsim.simulator.state import CommandResult

__all__ = [
    "CommandResult",
    "GraphSimulator",
]
