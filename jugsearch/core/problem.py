# Defines the interface any problem domain must satisfy to be searched (successors + goal test).
# jugsearch/core/problem.py
from __future__ import annotations
from typing import Hashable, Protocol, Sequence

State = Hashable

class ProblemDomain(Protocol):
    """Uninformed search problem interface (implicit state graph).

    - EXPAND(s): every state reachable from s by one legal transition, in a
      fixed order (the order decides which of several equally short paths wins)
    - IS-GOAL(s): pure goal predicate
    """
    def expand(self, s: State) -> Sequence[State]: ...
    def is_goal(self, s: State) -> bool: ...

class StartableProblem(ProblemDomain, Protocol):
    """A domain that also knows where its searches start."""
    def initial_state(self) -> State: ...
