"""
Graph Algorithm Simulator.

An interactive engine for building small graphs and replaying classic
traversal, shortest-path and topological-sort algorithms as timed,
highlighted animation frames.
"""

__version__ = "0.1.0"
