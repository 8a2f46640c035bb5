from tilesearch.domains.board import Board, check_same_shape


def misplaced_tiles(board: Board, goal: Board) -> int:
    """Number of non-blank cells whose value differs from the goal at the same position."""
    check_same_shape(board, goal)
    return sum(1 for v, g in zip(board.flat, goal.flat) if v != 0 and v != g)
