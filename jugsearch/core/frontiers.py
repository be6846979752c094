# jugsearch/core/frontiers.py
from __future__ import annotations
from collections import deque

class FIFOQueue:
    """Open list for breadth-first search: first pushed, first popped."""
    def __init__(self, items=()):
        self.q = deque(items)
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __bool__(self): return bool(self.q)
    def __iter__(self): return iter(self.q)
    def peek(self): return self.q[0]
