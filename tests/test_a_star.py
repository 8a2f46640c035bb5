import pytest

from tilesearch import solve, Found, Exhausted, Cutoff, Heuristic
from tilesearch.domains.board import Board, InvalidBoardError, scramble
from tilesearch.search.bfs import bfs, distances_from
from tilesearch.search.frontier import Frontier
from tilesearch.search.node import NodeArena, SearchNode, ROOT

START = Board([[8, 6, 7], [2, 5, 4], [3, 0, 1]])
GOAL = Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
HEURISTICS = [Heuristic.MISPLACED_TILES, Heuristic.MANHATTAN]


def assert_valid_path(res, start, goal):
    assert res.path[0].board == start and res.path[0].move is None and res.path[0].cost == 0
    assert res.path[-1].board == goal
    cur = start.copy()
    for i, step in enumerate(res.path[1:], 1):
        assert cur.move(step.move)
        assert cur == step.board
        assert step.cost == i
    assert res.total_cost == len(res.path) - 1 == len(res.moves)


@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_goal_equals_initial(heuristic):
    res = solve(GOAL, GOAL.copy(), heuristic)
    assert isinstance(res, Found)
    assert res.total_cost == 0
    assert len(res.path) == 1
    assert res.moves == ""
    assert res.stats.expanded == 0


def test_one_move():
    start = Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    res = solve(start, GOAL, "manhattan")
    assert isinstance(res, Found)
    assert res.moves == "R"
    assert res.termination == "ok"


@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_hardest_8_puzzle_instance(heuristic, p8_distances):
    res = solve(START, GOAL, heuristic)
    assert isinstance(res, Found)
    assert res.total_cost == p8_distances[START] == 31
    assert_valid_path(res, START, GOAL)
    # no board is expanded twice
    assert res.stats.visited == res.stats.expanded + 1
    assert res.stats.visited <= len(p8_distances)


def test_manhattan_expands_fewer_nodes_than_misplaced():
    mis = solve(START, GOAL, Heuristic.MISPLACED_TILES)
    man = solve(START, GOAL, Heuristic.MANHATTAN)
    assert man.stats.expanded < mis.stats.expanded


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_matches_bfs_on_scrambles(seed, heuristic):
    start = scramble(GOAL, 18, seed)
    expected = bfs(start, GOAL)
    res = solve(start, GOAL, heuristic)
    assert isinstance(expected, Found) and isinstance(res, Found)
    assert res.total_cost == expected.total_cost
    assert_valid_path(res, start, GOAL)


@pytest.mark.parametrize("tie_break", ["h", "g", "fifo", "lifo"])
def test_tie_breaks_are_optimal_and_reproducible(tie_break):
    start = scramble(GOAL, 20, seed=3)
    a = solve(start, GOAL, "manhattan", tie_break=tie_break)
    b = solve(start, GOAL, "manhattan", tie_break=tie_break)
    assert a.total_cost == bfs(start, GOAL).total_cost
    assert a.moves == b.moves
    assert a.stats.tie_break == tie_break


def test_unknown_tie_break():
    with pytest.raises(ValueError):
        solve(START, GOAL, "manhattan", tie_break="random")


@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_unreachable_goal_is_exhausted(heuristic):
    start = Board([[2, 1], [3, 0]])
    goal = Board.solved(2)
    res = solve(start, goal, heuristic, max_expansions=1000)
    assert isinstance(res, Exhausted)
    assert not res.proven_unsolvable
    assert res.termination == "exhausted"
    # the component holds 12 boards, each expanded exactly once
    assert res.stats.expanded == res.stats.visited == len(distances_from(start)) == 12


def test_parity_precheck_skips_search():
    start = Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
    res = solve(start, GOAL, "manhattan", check_solvable=True)
    assert isinstance(res, Exhausted)
    assert res.proven_unsolvable
    assert res.termination == "unsolvable"
    assert res.stats.expanded == 0


def test_precheck_does_not_change_solvable_outcome():
    start = scramble(GOAL, 16, seed=11)
    a = solve(start, GOAL, "manhattan")
    b = solve(start, GOAL, "manhattan", check_solvable=True)
    assert a.moves == b.moves


def test_expansion_cap_returns_cutoff():
    res = solve(START, GOAL, "misplaced", max_expansions=5)
    assert isinstance(res, Cutoff)
    assert res.reason == "max_expansions"
    assert res.stats.expanded == 5


def test_expansion_cap_still_returns_goal_already_in_reach():
    res = solve(GOAL, GOAL, "manhattan", max_expansions=0)
    assert isinstance(res, Found) and res.total_cost == 0

    start = Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    uncapped = solve(start, GOAL, "manhattan")
    capped = solve(start, GOAL, "manhattan", max_expansions=uncapped.stats.expanded)
    assert isinstance(capped, Found)
    assert capped.moves == uncapped.moves == "R"
    assert capped.stats.peak_open == 3


def test_cutoff_reports_peak_frontier_size():
    start = Board([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    res = solve(start, GOAL, "manhattan", max_expansions=1)
    assert isinstance(res, Cutoff)
    assert res.stats.expanded == 1
    assert res.stats.peak_open == res.stats.generated == 2


def test_timeout_returns_cutoff():
    res = solve(START, GOAL, "misplaced", timeout_sec=0.0)
    assert isinstance(res, Cutoff)
    assert res.termination == "timeout"


def test_size_mismatch_fails_before_search():
    with pytest.raises(InvalidBoardError):
        solve(Board.solved(2), GOAL, "manhattan")


def test_inputs_not_mutated():
    start = scramble(GOAL, 12, seed=5)
    before_start, before_goal = start.copy(), GOAL.copy()
    solve(start, GOAL, "manhattan")
    assert start == before_start and GOAL == before_goal


def test_independent_solves_do_not_share_state():
    s1 = scramble(GOAL, 10, seed=1)
    s2 = scramble(GOAL, 14, seed=2)
    first = solve(s1, GOAL, "manhattan")
    solve(s2, GOAL, "manhattan")
    again = solve(s1, GOAL, "manhattan")
    assert first.moves == again.moves
    assert first.stats.expanded == again.stats.expanded


def test_frontier_orders_by_f_then_tie_break():
    b = Board.solved(2)
    nodes = [SearchNode(b, g=2, h=1), SearchNode(b, g=0, h=3), SearchNode(b, g=1, h=1)]
    fr = Frontier("h")
    for i, n in enumerate(nodes):
        fr.push(n, i)
    # f=2 first; among f=3, lower h (g=2,h=1) before h=3
    assert [fr.pop(), fr.pop(), fr.pop()] == [2, 0, 1]
    assert not fr

    fr = Frontier("lifo")
    for i in range(3):
        fr.push(SearchNode(b, g=1, h=1), i)
    assert [fr.pop() for _ in range(3)] == [2, 1, 0]


def test_arena_lineage():
    b = Board.solved(2)
    arena = NodeArena()
    root = arena.add(SearchNode(b, 0, 2, ROOT, None))
    child_board = b.copy(); child_board.move("L")
    child = arena.add(SearchNode(child_board, 1, 1, root, "L"))
    assert [n.move for n in arena.lineage(child)] == [None, "L"]
    assert len(arena) == 2
