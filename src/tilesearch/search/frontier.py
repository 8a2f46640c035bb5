from __future__ import annotations
from typing import Callable, Dict, List, Tuple
import heapq
import itertools

from tilesearch.search.node import SearchNode

Priority = Tuple[int, int, int]

# secondary key among equal f; the insertion counter always breaks the rest
TIE_BREAKS: Dict[str, Callable[[SearchNode, int], Priority]] = {
    "h":    lambda n, ctr: (n.f, n.h, ctr),    # closer to goal first
    "g":    lambda n, ctr: (n.f, -n.g, ctr),   # deeper first
    "fifo": lambda n, ctr: (n.f, 0, ctr),      # older first
    "lifo": lambda n, ctr: (n.f, 0, -ctr),     # newer first
}


class Frontier:
    """Min-heap of node handles keyed by f = g + h."""

    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {sorted(TIE_BREAKS)}")
        self.tie_break = tie_break
        self._key = TIE_BREAKS[tie_break]
        self._heap: List[Tuple[Priority, int]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode, handle: int) -> None:
        heapq.heappush(self._heap, (self._key(node, next(self._counter)), handle))

    def pop(self) -> int:
        _, handle = heapq.heappop(self._heap)
        return handle

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
