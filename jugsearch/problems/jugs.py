# jugsearch/problems/jugs.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple, Union

from ..core.errors import InvalidProblemError


class Jugs(NamedTuple):
    """Contents of the (left, right) jugs. Compares equal to a plain tuple."""
    left: int
    right: int


class Side(Enum):
    L = 0
    R = 1

L, R = Side.L, Side.R


@dataclass(frozen=True)
class Fill:
    side: Side
    def __str__(self): return f"fill {self.side.name}"

@dataclass(frozen=True)
class Empty:
    side: Side
    def __str__(self): return f"empty {self.side.name}"

@dataclass(frozen=True)
class Pour:
    src: Side
    dst: Side
    def __str__(self): return f"pour {self.src.name}->{self.dst.name}"

Action = Union[Fill, Empty, Pour]

# Enumeration order of candidate moves; BFS breaks ties between equally short paths by it.
_CANDIDATES: Tuple[Action, ...] = (Fill(L), Fill(R), Empty(L), Empty(R), Pour(L, R), Pour(R, L))


class JugsProblem:
    """
    Two-jug water puzzle.

    - State: Jugs(left, right) amounts
    - ACTIONS(s): fill a jug that is not full, empty a jug that is not empty,
      pour from a non-empty jug into the other one while it is not full
    - RESULT(s,a): pouring moves min(source amount, destination room)
    - IS-GOAL(s): either jug holds exactly ``target``
    """
    def __init__(self, capacities: Tuple[int, int] = (3, 5), target: int = 1, start: Tuple[int, int] = (0, 0)):
        if len(capacities) != 2 or any(int(c) != c or c <= 0 for c in capacities):
            raise InvalidProblemError(f"jug capacities must be two positive integers, got {capacities!r}")
        if int(target) != target or target < 0:
            raise InvalidProblemError(f"target must be a non-negative integer, got {target!r}")
        if len(start) != 2 or not all(0 <= s <= c for s, c in zip(start, capacities)):
            raise InvalidProblemError(f"start {start!r} does not fit capacities {capacities!r}")
        self.capacities = Jugs(*capacities)
        self.target = target
        self._start = Jugs(*start)

    def initial_state(self) -> Jugs:
        return self._start

    def is_goal(self, state: Tuple[int, int]) -> bool:
        left, right = state
        return left == self.target or right == self.target

    def expand(self, state: Tuple[int, int]) -> List[Jugs]:
        return [self.apply_action(state, a) for a in self.possible_actions(state)]

    def possible_actions(self, state: Tuple[int, int]) -> List[Action]:
        return [a for a in _CANDIDATES if self.action_is_possible(state, a)]

    def action_is_possible(self, state: Tuple[int, int], action: Action) -> bool:
        if isinstance(action, Fill):
            return state[action.side.value] < self.capacities[action.side.value]
        if isinstance(action, Empty):
            return state[action.side.value] > 0
        if isinstance(action, Pour):
            if action.src == action.dst:
                return False
            return state[action.src.value] > 0 and state[action.dst.value] < self.capacities[action.dst.value]
        return False

    def apply_action(self, state: Tuple[int, int], action: Action) -> Jugs:
        amounts = list(state)
        if isinstance(action, Fill):
            amounts[action.side.value] = self.capacities[action.side.value]
        elif isinstance(action, Empty):
            amounts[action.side.value] = 0
        elif isinstance(action, Pour) and action.src != action.dst:
            src, dst = action.src.value, action.dst.value
            amount = min(amounts[src], self.capacities[dst] - amounts[dst])
            amounts[src] -= amount
            amounts[dst] += amount
        return Jugs(*amounts)

    def actions_between(self, path: Sequence[Tuple[int, int]]) -> List[Action]:
        """Action taken at each step of a back-traced path (first one that explains the move)."""
        actions = []
        for s, s2 in zip(path, path[1:]):
            for a in self.possible_actions(s):
                if self.apply_action(s, a) == tuple(s2):
                    actions.append(a)
                    break
            else:
                raise InvalidProblemError(f"no single move leads from {tuple(s)} to {tuple(s2)}")
        return actions


def jugs_problem(capacities: Tuple[int, int] = (3, 5), target: int = 1) -> JugsProblem:
    """
    Factory for the classic puzzle: empty 3 and 5 unit jugs, measure exactly 1 unit.
    """
    return JugsProblem(capacities=capacities, target=target)
