"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphsim.animation import AnimationScheduler, ManualTimers
from graphsim.graph import GraphStore
from graphsim.simulator import GraphSimulator

# Exact binary fraction so repeated clock advances land on due times
FRAME_DELAY = 0.5


@pytest.fixture
def store() -> GraphStore:
    """Return an empty directed, weighted graph."""
    return GraphStore()


@pytest.fixture
def diamond_store() -> GraphStore:
    """Return the diamond A->B, A->C, B->D, C->D with unit weights."""
    graph = GraphStore()
    for label in "ABCD":
        graph.add_node(label)
    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    graph.add_edge("B", "D")
    graph.add_edge("C", "D")
    return graph


@pytest.fixture
def manual_timers() -> ManualTimers:
    """Return a virtual-clock timer backend."""
    return ManualTimers()


@pytest.fixture
def scheduler(manual_timers: ManualTimers) -> AnimationScheduler:
    """Return a scheduler on the virtual clock with a 0.5s frame delay."""
    return AnimationScheduler(timers=manual_timers, delay=FRAME_DELAY)


@pytest.fixture
def simulator(scheduler: AnimationScheduler) -> GraphSimulator:
    """Return a simulator whose animations run on the virtual clock."""
    return GraphSimulator(scheduler=scheduler)
