"""
Configuration constants for the graph algorithm simulator.

All tunable parameters are defined here. Overrides are read from
environment variables (optionally via a project-root .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphsim/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Graph Configuration
# =============================================================================

# Mode flags of a freshly created graph
DEFAULT_DIRECTED = True
DEFAULT_WEIGHTED = True

# Weight assigned to unweighted edges and to invalid weight input
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Strategy tags reported with shortest-path results
STRATEGY_BFS = "bfs"
STRATEGY_DIJKSTRA = "dijkstra"

# =============================================================================
# Animation Configuration
# =============================================================================

# Fixed interval between consecutive animation levels (milliseconds)
ANIMATION_DELAY_MS = int(os.environ.get("GRAPHSIM_ANIMATION_DELAY_MS", "700"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def animation_delay_seconds() -> float:
    """Per-level animation interval in seconds."""
    return ANIMATION_DELAY_MS / 1000
