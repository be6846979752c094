# jugsearch/algorithms/bfs.py
# Breadth-first search over the implicit state graph of any ProblemDomain.
from __future__ import annotations
import logging
from typing import Optional, Set
from ..core.errors import EngineReusedError, SearchError
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult, MeasuredRun
from ..core.node import SearchNode
from ..core.problem import ProblemDomain, StartableProblem, State

logger = logging.getLogger(__name__)

_MISSING = object()


class BreadthFirstSearch:
    """
    Level-by-level search returning the first path found to a goal.

    - Goals are detected when a successor is generated, so the start state is
      never goal-tested: a start that already satisfies IS-GOAL is expanded.
    - The visited set starts empty; the start state is not recorded in it.
    - One engine, one search: calling ``search`` again raises EngineReusedError.
    """

    def __init__(self, problem: ProblemDomain):
        self.problem = problem
        self.frontier = FIFOQueue()
        self.visited: Set[State] = set()
        self.nodes_expanded = 0
        self.states_generated = 0
        self._used = False

    def search(self, initial_state: State) -> Optional[SearchNode]:
        if self._used:
            raise EngineReusedError("BreadthFirstSearch instances are single-use; build a new one per search")
        self._used = True

        self.frontier.push(SearchNode.from_state(initial_state))

        while self.frontier:
            node = self.frontier.pop()
            self.nodes_expanded += 1
            for child in self.problem.expand(node.state):
                self.states_generated += 1
                if self.problem.is_goal(child):
                    logger.debug("goal %r at depth %d after %d expansions",
                                 child, node.depth + 1, self.nodes_expanded)
                    return SearchNode.new(child, node)
                if child not in self.visited:
                    self.visited.add(child)
                    self.frontier.push(SearchNode.new(child, node))

        logger.debug("state space exhausted: %d states visited, no goal", len(self.visited))
        return None


def breadth_first_search(problem: StartableProblem, initial_state: State = _MISSING) -> SearchResult:
    name = "BFS"
    start = problem.initial_state() if initial_state is _MISSING else initial_state
    engine = BreadthFirstSearch(problem)

    with MeasuredRun() as meter:
        try:
            goal = engine.search(start)
        except SearchError as e:
            logger.warning("%s failed: %s", name, e)
            return SearchResult(name, False, [], None, engine.nodes_expanded, engine.states_generated,
                                meter.elapsed, meter.peak_kb, error=str(e))

    if goal is None:
        return SearchResult(name, False, [], None, engine.nodes_expanded, engine.states_generated,
                            meter.elapsed, meter.peak_kb)
    return SearchResult(name, True, goal.back_trace(), goal.depth, engine.nodes_expanded,
                        engine.states_generated, meter.elapsed, meter.peak_kb)
