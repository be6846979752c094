# jugsearch/core/node.py
# A Node is one step of a discovered search path: a state plus a link to the node it was reached from.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from .problem import State


@dataclass(frozen=True)
class SearchNode:
    """Immutable search-tree node.

    Following ``parent`` from any node always ends at a root (``parent is None``):
    the only way to add a link is ``SearchNode.new``, which chains onto an
    already existing node, so the chain is finite and acyclic.

    Nodes never change after construction, so siblings may share one parent
    chain; ``clone`` gives a private deep copy when one is wanted.
    """
    state: State
    parent: Optional["SearchNode"] = field(default=None, repr=False)
    depth: int = 0

    @classmethod
    def from_state(cls, state: State) -> "SearchNode":
        """Root node for a search starting at ``state``."""
        return cls(state)

    @classmethod
    def new(cls, state: State, parent: "SearchNode") -> "SearchNode":
        """Child node reached from ``parent`` by one transition."""
        return cls(state, parent, parent.depth + 1)

    def back_trace(self) -> List[State]:
        """States from the root down to this node (both ends included)."""
        states = []
        cur = self
        while cur.parent is not None:
            states.append(cur.state)
            cur = cur.parent
        states.append(cur.state)
        states.reverse()
        return states

    def clone(self) -> "SearchNode":
        """Private copy of this node and its whole ancestor chain."""
        states = self.back_trace()
        node = SearchNode.from_state(states[0])
        for s in states[1:]:
            node = SearchNode.new(s, node)
        return node

    def __len__(self) -> int:
        return self.depth + 1
