# jugsearch/problems/grid.py
from __future__ import annotations
from typing import List, Set, Tuple

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem:
    """
    4-neighbor grid pathfinding, as a second domain for the same engine.

    - State: (row, col) tuple
    - EXPAND(s): in-bounds, non-wall neighbors in Up, Down, Left, Right order
    - IS-GOAL(s): s == goal
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self._start = start
        self._goal = goal
        self.walls = walls or set()

    def initial_state(self) -> Coord:
        return self._start

    def is_goal(self, state: Coord) -> bool:
        return state == self._goal

    def expand(self, state: Coord) -> List[Coord]:
        r, c = state
        out = []
        for dr, dc in _MOVES.values():
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and (nr, nc) not in self.walls:
                out.append((nr, nc))
        return out

def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return GridProblem(rows=5, cols=7, start=(0,0), goal=(4,6), walls=walls)
