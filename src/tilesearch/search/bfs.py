from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Dict, Optional, Tuple

from tilesearch.domains.board import Board, check_same_shape
from tilesearch.search.result import Cutoff, Exhausted, Found, PathStep, SearchStats, SolveResult


def bfs(start: Board, goal: Board, max_states: Optional[int] = None) -> SolveResult:
    """Breadth-first search; with unit move costs the first path found is optimal."""
    check_same_shape(start, goal)
    t0 = perf_counter()
    stats = SearchStats(algorithm="BFS")
    q = deque([start])
    parent: Dict[Board, Optional[Tuple[Board, str]]] = {start: None}
    peak = 1
    while q:
        if max_states is not None and len(parent) > max_states:
            stats.visited = len(parent)
            stats.time_sec = perf_counter() - t0
            return Cutoff(reason="max_states", stats=stats)
        peak = max(peak, len(q))
        s = q.popleft()
        if s == goal:
            # reconstruct
            steps = []
            link = parent[s]
            while link is not None:
                prev, d = link
                steps.append((s, d))
                s = prev
                link = parent[s]
            steps.append((s, None))
            steps.reverse()
            path = [PathStep(board=b, move=d, cost=i) for i, (b, d) in enumerate(steps)]
            stats.peak_open = peak
            stats.visited = len(parent)
            stats.time_sec = perf_counter() - t0
            return Found(path=path, total_cost=len(path) - 1, stats=stats)
        stats.expanded += 1
        for d, s2 in s.successors():
            stats.generated += 1
            if s2 in parent:
                stats.duplicates += 1
                continue
            parent[s2] = (s, d)
            q.append(s2)
    stats.peak_open = peak
    stats.visited = len(parent)
    stats.time_sec = perf_counter() - t0
    return Exhausted(stats=stats)


def distances_from(root: Board) -> Dict[Board, int]:
    """Move distance from ``root`` to every board in its component.

    Moves are reversible, so this is also the distance *to* ``root``.
    """
    dist: Dict[Board, int] = {root: 0}
    q = deque([root])
    while q:
        s = q.popleft()
        d = dist[s] + 1
        for _, s2 in s.successors():
            if s2 not in dist:
                dist[s2] = d
                q.append(s2)
    return dist
