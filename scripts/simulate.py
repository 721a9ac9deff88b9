#!/usr/bin/env python3
"""
Graph Simulator CLI - build a graph and animate an algorithm in the terminal.

Usage:
    python scripts/simulate.py --node A --node B --node C --edge A:B --edge A:C bfs --start A
    python scripts/simulate.py --nodes A,B,C --edge A:B:4 --edge A:C:1 --edge C:B:1 path --start A --end B
    python scripts/simulate.py --nodes A,B,C,D --edge A:B --edge B:C --edge C:D topo
    python scripts/simulate.py --nodes A,B,C --edge A:B --edge B:C --undirected dfs --start C --no-delay

Algorithms:
    bfs   - Breadth-first traversal, one frame per distance level
    dfs   - Depth-first traversal, one frame per node
    topo  - Kahn's topological sort (directed graphs only)
    path  - Shortest path (BFS if all weights are 1, otherwise Dijkstra)

Edges are written FROM:TO or FROM:TO:WEIGHT.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphsim.animation import AnimationFrame, AnimationScheduler, ManualTimers  # noqa: E402
from graphsim.config import ANIMATION_DELAY_MS, LOG_LEVEL  # noqa: E402
from graphsim.report import format_result  # noqa: E402
from graphsim.simulator import CommandResult, GraphSimulator  # noqa: E402


def parse_edge(text: str) -> tuple[str, str, str | None]:
    """Split 'A:B' or 'A:B:4' into (source, target, weight)."""
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Edge must be FROM:TO or FROM:TO:WEIGHT, got '{text}'")
    weight = parts[2] if len(parts) == 3 else None
    return parts[0], parts[1], weight


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a graph and animate a graph algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--node",
        action="append",
        default=[],
        help="Add a node (repeatable)",
    )
    parser.add_argument(
        "--nodes",
        type=str,
        default="",
        help="Comma-separated node labels",
    )
    parser.add_argument(
        "--edge",
        action="append",
        type=parse_edge,
        default=[],
        help="Add an edge FROM:TO[:WEIGHT] (repeatable)",
    )
    parser.add_argument(
        "--undirected",
        action="store_true",
        help="Treat edges as undirected",
    )
    parser.add_argument(
        "--unweighted",
        action="store_true",
        help="Ignore edge weights (all weights become 1)",
    )
    parser.add_argument(
        "algorithm",
        choices=["bfs", "dfs", "topo", "path"],
        help="Algorithm to run",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Start node (bfs, dfs, path)",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="End node (path)",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=ANIMATION_DELAY_MS,
        help=f"Delay between animation frames (default: {ANIMATION_DELAY_MS})",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Play all animation frames immediately",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if args.algorithm in ("bfs", "dfs", "path") and not args.start:
        parser.error(f"--start is required for {args.algorithm}")
    if args.algorithm == "path" and not args.end:
        parser.error("--end is required for path")

    return args


def print_frame(frame: AnimationFrame) -> None:
    """Print one animation frame."""
    current = ", ".join(sorted(frame.current))
    visited = ", ".join(sorted(frame.visited))
    print(f"  [{frame.index + 1}/{frame.total}] current: {current:<12} visited: {visited}")


def report_failure(result: CommandResult) -> int:
    print(f"Error ({result.error.value}): {result.message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    timers = ManualTimers() if args.no_delay else None
    scheduler = AnimationScheduler(
        timers=timers,
        delay=args.delay_ms / 1000,
        on_frame=print_frame,
    )

    with GraphSimulator(scheduler=scheduler) as sim:
        sim.set_directed(not args.undirected)
        sim.set_weighted(not args.unweighted)

        labels = list(args.node) + [n for n in args.nodes.split(",") if n.strip()]
        for label in labels:
            result = sim.add_node(label)
            if not result.ok:
                return report_failure(result)

        for source, target, weight in args.edge:
            result = sim.add_edge(source, target, weight)
            if not result.ok:
                return report_failure(result)

        if args.algorithm == "bfs":
            result = sim.run_bfs(args.start)
        elif args.algorithm == "dfs":
            result = sim.run_dfs(args.start)
        elif args.algorithm == "topo":
            result = sim.run_topo_sort()
        else:
            result = sim.run_shortest_path(args.start, args.end)

        if not result.ok:
            return report_failure(result)

        print("\n" + "=" * 60)
        print(format_result(result.payload))
        print("=" * 60 + "\n")

        if result.frames:
            print("Animation:")
            try:
                if timers is not None:
                    timers.run_all()
                else:
                    scheduler.wait()
            except KeyboardInterrupt:
                print("\n\nAnimation interrupted by user")
                return 130

        print(f"\n{result.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
