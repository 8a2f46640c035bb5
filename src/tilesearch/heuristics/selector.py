from __future__ import annotations
from enum import Enum
from typing import Callable, Union

from tilesearch.domains.board import Board
from tilesearch.heuristics.manhattan import goal_positions, manhattan_from
from tilesearch.heuristics.misplaced import misplaced_tiles


class Heuristic(str, Enum):
    MISPLACED_TILES = "misplaced"
    MANHATTAN = "manhattan"

    @classmethod
    def parse(cls, value: Union["Heuristic", str, int]) -> "Heuristic":
        """Accepts an enum member, its name/value, or the menu numbers 1 and 2."""
        if isinstance(value, Heuristic):
            return value
        key = str(value).strip().lower()
        aliases = {
            "1": cls.MISPLACED_TILES, "misplaced": cls.MISPLACED_TILES,
            "misplaced_tiles": cls.MISPLACED_TILES, "h1": cls.MISPLACED_TILES,
            "2": cls.MANHATTAN, "manhattan": cls.MANHATTAN, "h2": cls.MANHATTAN,
        }
        if key not in aliases:
            raise ValueError(f"unknown heuristic {value!r}, expected misplaced|manhattan (or 1|2)")
        return aliases[key]

    @property
    def label(self) -> str:
        return "Misplaced Tiles" if self is Heuristic.MISPLACED_TILES else "Manhattan Distance"


def resolve(heuristic: Union[Heuristic, str, int], goal: Board) -> Callable[[Board], int]:
    """Bind the goal once; the returned callable is what the search loop calls."""
    kind = Heuristic.parse(heuristic)
    if kind is Heuristic.MISPLACED_TILES:
        return lambda b: misplaced_tiles(b, goal)
    goal_pos = goal_positions(goal)
    return lambda b: manhattan_from(b, goal_pos)
