# jugsearch/problems/checks.py
from collections import deque

from ..core.errors import InvalidProblemError


def _require_hashable(s, where):
    try:
        hash(s)
    except TypeError:
        raise InvalidProblemError(f"{where} produced unhashable state {s!r}") from None


def sanity_check_problem(problem, max_states: int = 10_000):
    """Walks states breadth-first and checks EXPAND is finite, hashable and deterministic."""
    start = problem.initial_state()
    _require_hashable(start, "initial_state()")
    seen = set()
    q = deque([start])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        first = list(problem.expand(s))
        if first != list(problem.expand(s)):
            raise InvalidProblemError(f"expand({s!r}) is not deterministic")
        for s2 in first:
            _require_hashable(s2, f"expand({s!r})")
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; expand is deterministic."
