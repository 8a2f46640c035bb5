"""A* solver for the N×N sliding-tile puzzle."""
from tilesearch.domains.board import Board, InvalidBoardError, parse_board, scramble
from tilesearch.heuristics.selector import Heuristic
from tilesearch.search.a_star import solve
from tilesearch.search.result import Cutoff, Exhausted, Found, PathStep, SearchStats, SolveResult

__all__ = [
    "Board", "InvalidBoardError", "parse_board", "scramble",
    "Heuristic", "solve",
    "Found", "Exhausted", "Cutoff", "PathStep", "SearchStats", "SolveResult",
]
