from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from tilesearch.domains.board import Board

ROOT = -1  # parent handle of the initial node


@dataclass(frozen=True)
class SearchNode:
    board: Board
    g: int
    h: int
    parent: int = ROOT
    move: Optional[str] = None

    @property
    def f(self) -> int:
        return self.g + self.h


class NodeArena:
    """Append-only store of search nodes; a node's handle is its index.

    Parents are referenced by handle, so the whole search tree is released
    together when the arena goes out of scope.
    """

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, handle: int) -> SearchNode:
        return self._nodes[handle]

    def __len__(self) -> int:
        return len(self._nodes)

    def lineage(self, handle: int) -> List[SearchNode]:
        """Nodes from the root down to ``handle``."""
        path: List[SearchNode] = []
        while handle != ROOT:
            node = self._nodes[handle]
            path.append(node)
            handle = node.parent
        path.reverse()
        return path
