from __future__ import annotations
from typing import Optional, Set, Union
from time import perf_counter

from tilesearch.domains.board import Board, DIRECTIONS, check_same_shape
from tilesearch.heuristics.selector import Heuristic, resolve
from tilesearch.search.frontier import Frontier
from tilesearch.search.node import NodeArena, SearchNode, ROOT
from tilesearch.search.result import Cutoff, Exhausted, Found, PathStep, SearchStats, SolveResult


def reconstruct_path(arena: NodeArena, handle: int):
    return [PathStep(board=n.board, move=n.move, cost=n.g) for n in arena.lineage(handle)]


def solve(
    initial: Board,
    goal: Board,
    heuristic: Union[Heuristic, str, int] = Heuristic.MANHATTAN,
    *,
    tie_break: str = "h",
    max_expansions: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    check_solvable: bool = False,
) -> SolveResult:
    """
    A* over sliding-tile boards with lazy duplicate detection.

    Boards enter the visited set when popped, not when pushed; a popped board
    that is already visited is skipped. Both heuristics are admissible and
    consistent, so the first pop of the goal carries an optimal cost.

    timeout_sec is polled once per iteration and max_expansions just before
    each expansion; either ends the search with ``Cutoff``. check_solvable
    runs the parity test first and returns
    ``Exhausted(proven_unsolvable=True)`` without searching.
    """
    check_same_shape(initial, goal)
    kind = Heuristic.parse(heuristic)
    hfun = resolve(kind, goal)
    frontier = Frontier(tie_break)
    t0 = perf_counter()

    stats = SearchStats(algorithm="A*", heuristic=kind.value, tie_break=tie_break)

    def finish(result: SolveResult) -> SolveResult:
        stats.visited = len(visited)
        stats.time_sec = perf_counter() - t0
        return result

    visited: Set[Board] = set()
    if check_solvable and not initial.is_solvable_towards(goal):
        return finish(Exhausted(stats=stats, proven_unsolvable=True))

    arena = NodeArena()
    root = SearchNode(board=initial.copy(), g=0, h=hfun(initial), parent=ROOT, move=None)
    frontier.push(root, arena.add(root))
    seen_ever: Set[Board] = {root.board}
    stats.peak_open = 1

    while frontier:
        stats.peak_open = max(stats.peak_open, len(frontier))
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return finish(Cutoff(reason="timeout", stats=stats))

        handle = frontier.pop()
        node = arena[handle]
        if node.board in visited:
            stats.stale += 1
            continue
        visited.add(node.board)

        if node.board.is_goal(goal):
            return finish(Found(path=reconstruct_path(arena, handle), total_cost=node.g, stats=stats))

        # the cap only stops further expansion; a goal already in reach is still returned
        if max_expansions is not None and stats.expanded >= max_expansions:
            return finish(Cutoff(reason="max_expansions", stats=stats))
        stats.expanded += 1
        for d in DIRECTIONS:
            child = node.board.copy()
            if not child.move(d):
                continue
            stats.generated += 1
            if child in seen_ever:
                stats.duplicates += 1
            else:
                seen_ever.add(child)
            succ = SearchNode(board=child, g=node.g + 1, h=hfun(child), parent=handle, move=d)
            frontier.push(succ, arena.add(succ))

    return finish(Exhausted(stats=stats))
