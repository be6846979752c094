#!/usr/bin/env python3
"""
Command-line interface for the water-jug solver.

Usage:
    python -m jugsearch
    python -m jugsearch --capacities 4 9 --target 6 --verbose
"""
from __future__ import annotations

import argparse
import logging

from .algorithms.bfs import breadth_first_search
from .benchmarks.run_all import fmt_time
from .core.errors import InvalidProblemError
from .problems.jugs import JugsProblem

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jugsearch", description="Solve the two-jug water puzzle with breadth-first search")
    parser.add_argument("--capacities", type=int, nargs=2, default=[3, 5], metavar=("LEFT", "RIGHT"),
                        help="Jug capacities")
    parser.add_argument("--target", type=int, default=1, help="Amount either jug must end up holding")
    parser.add_argument("--start", type=int, nargs=2, default=[0, 0], metavar=("LEFT", "RIGHT"),
                        help="Initial jug contents")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        problem = JugsProblem(capacities=tuple(args.capacities), target=args.target, start=tuple(args.start))
    except InvalidProblemError as e:
        logger.error("%s", e)
        return 1

    r = breadth_first_search(problem)
    if not r.success:
        print(f"No way to measure {args.target} with jugs {tuple(args.capacities)} "
              f"(expanded={r.nodes_expanded})")
        return 1

    actions = problem.actions_between(r.path)
    print(tuple(r.path[0]))
    for action, state in zip(actions, r.path[1:]):
        print(f"  {str(action):<10} -> {tuple(state)}")
    print(f"{r.algo}: depth={r.depth} expanded={r.nodes_expanded} "
          f"generated={r.states_generated} time={fmt_time(r.time_s)}s peak={r.peak_kb}KB")
    return 0
