from __future__ import annotations
from typing import Dict, Tuple

from tilesearch.domains.board import Board, check_same_shape


def goal_positions(goal: Board) -> Dict[int, Tuple[int, int]]:
    return {tile: divmod(idx, goal.n) for idx, tile in enumerate(goal.flat)}


def manhattan_from(board: Board, goal_pos: Dict[int, Tuple[int, int]]) -> int:
    dist = 0
    n = board.n
    for idx, tile in enumerate(board.flat):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def manhattan(board: Board, goal: Board) -> int:
    """Sum of Manhattan distances of every tile to its goal cell (blank ignored)."""
    check_same_shape(board, goal)
    return manhattan_from(board, goal_positions(goal))
