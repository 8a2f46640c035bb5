from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union

from tilesearch.domains.board import Board


@dataclass
class SearchStats:
    algorithm: str = "A*"
    heuristic: str = ""
    tie_break: str = ""
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0  # generated boards that had been generated before
    stale: int = 0       # popped entries whose board was already visited
    peak_open: int = 0
    visited: int = 0
    time_sec: float = 0.0


@dataclass(frozen=True)
class PathStep:
    board: Board
    move: Optional[str]  # None at the initial board
    cost: int


@dataclass
class Found:
    path: List[PathStep]
    total_cost: int
    stats: SearchStats = field(default_factory=SearchStats)

    termination = "ok"

    @property
    def moves(self) -> str:
        return "".join(step.move for step in self.path if step.move is not None)

    @property
    def boards(self) -> List[Board]:
        return [step.board for step in self.path]


@dataclass
class Exhausted:
    """Every board reachable from the start was expanded without meeting the goal."""
    stats: SearchStats = field(default_factory=SearchStats)
    proven_unsolvable: bool = False  # decided by the parity pre-check, no search ran

    @property
    def termination(self) -> str:
        return "unsolvable" if self.proven_unsolvable else "exhausted"


@dataclass
class Cutoff:
    """Search stopped by a caller-imposed limit before reaching an answer."""
    reason: str
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def termination(self) -> str:
        return self.reason


SolveResult = Union[Found, Exhausted, Cutoff]
