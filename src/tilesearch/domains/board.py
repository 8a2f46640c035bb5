from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
import math
import numbers
import random
import re

Cells = Tuple[int, ...]

DIRECTIONS: Tuple[str, ...] = ("L", "R", "U", "D")
INVERSE: Dict[str, str] = {"L": "R", "R": "L", "U": "D", "D": "U"}

# (row delta, col delta) of the cell the blank swaps with
_DELTA: Dict[str, Tuple[int, int]] = {
    "L": (0, -1),
    "R": (0, 1),
    "U": (-1, 0),
    "D": (1, 0),
}


class InvalidBoardError(ValueError):
    """Board shape or contents are not a valid N×N sliding-tile configuration."""


class Board:
    """N×N sliding-tile grid (0 is the blank), stored row-major.

    Equality and hashing are structural over the cells. ``move`` advances the
    board in place, so callers copy first when the original must survive.
    """
    __slots__ = ("n", "_cells")

    def __init__(self, rows: Sequence[Sequence[int]]):
        rows = [list(r) for r in rows]
        n = len(rows)
        if n < 2:
            raise InvalidBoardError(f"board needs at least 2 rows, got {n}")
        for i, r in enumerate(rows):
            if len(r) != n:
                raise InvalidBoardError(f"row {i} has {len(r)} cells, expected {n} (board must be square)")
        cells = [v for r in rows for v in r]
        _check_permutation(cells, n)
        self.n = n
        self._cells: List[int] = [int(v) for v in cells]

    @classmethod
    def from_flat(cls, cells: Iterable[int], n: Optional[int] = None) -> "Board":
        cells = list(cells)
        if n is None:
            n = math.isqrt(len(cells))
        if n * n != len(cells):
            raise InvalidBoardError(f"{len(cells)} cells do not form an {n}x{n} board")
        return cls([cells[r * n:(r + 1) * n] for r in range(n)])

    @classmethod
    def solved(cls, n: int) -> "Board":
        """1..n*n-1 in reading order, blank last."""
        return cls.from_flat(list(range(1, n * n)) + [0], n)

    # ---------- value semantics ----------
    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.n = self.n
        b._cells = list(self._cells)
        return b

    @property
    def flat(self) -> Cells:
        return tuple(self._cells)

    @property
    def rows(self) -> Tuple[Cells, ...]:
        n = self.n
        return tuple(tuple(self._cells[r * n:(r + 1) * n]) for r in range(n))

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        r, c = pos
        return self._cells[r * self.n + c]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.n == other.n and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self.n, tuple(self._cells)))

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows)

    def __repr__(self) -> str:
        return f"Board({[list(r) for r in self.rows]!r})"

    # ---------- lookups ----------
    def find_tile_position(self, value: int) -> Optional[Tuple[int, int]]:
        for idx, v in enumerate(self._cells):
            if v == value:
                return divmod(idx, self.n)
        return None

    def is_goal(self, goal: "Board") -> bool:
        return self == goal

    # ---------- dynamics ----------
    def move(self, direction: str) -> bool:
        """Swap the blank with its neighbour in ``direction``; False if that leaves the grid."""
        try:
            dr, dc = _DELTA[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}, expected one of {DIRECTIONS}") from None
        z = self._cells.index(0)
        r, c = divmod(z, self.n)
        r2, c2 = r + dr, c + dc
        if not (0 <= r2 < self.n and 0 <= c2 < self.n):
            return False
        j = r2 * self.n + c2
        self._cells[z], self._cells[j] = self._cells[j], self._cells[z]
        return True

    def successors(self) -> Iterator[Tuple[str, "Board"]]:
        """(direction, board) for every legal blank move, in L, R, U, D order."""
        for d in DIRECTIONS:
            b = self.copy()
            if b.move(d):
                yield d, b

    # ---------- solvability ----------
    def is_solvable_towards(self, goal: "Board") -> bool:
        """Parity rule for an arbitrary goal.

        The goal is reachable iff the permutation taking this board's cells to the
        goal's cells (blank included) has the same parity as the blank's Manhattan
        displacement: every move is one transposition and one blank step.
        """
        check_same_shape(self, goal)
        where = {v: i for i, v in enumerate(goal._cells)}
        perm = [where[v] for v in self._cells]
        # parity from cycle decomposition
        seen = [False] * len(perm)
        transpositions = 0
        for i in range(len(perm)):
            if seen[i]:
                continue
            length = 0
            j = i
            while not seen[j]:
                seen[j] = True
                j = perm[j]
                length += 1
            transpositions += length - 1
        r, c = self.find_tile_position(0)
        gr, gc = goal.find_tile_position(0)
        blank_steps = abs(r - gr) + abs(c - gc)
        return (transpositions % 2) == (blank_steps % 2)


def _check_permutation(cells: Sequence[int], n: int) -> None:
    bad = [v for v in cells if isinstance(v, bool) or not isinstance(v, numbers.Integral)]
    if bad:
        raise InvalidBoardError(f"cells must be integers, got {bad!r}")
    expected = set(range(n * n))
    if len(cells) != n * n or set(cells) != expected:
        missing = sorted(expected - set(cells))
        extra = sorted(set(cells) - expected)
        dupes = sorted({v for v in cells if cells.count(v) > 1})
        raise InvalidBoardError(
            f"cells must be a permutation of 0..{n * n - 1} "
            f"(missing={missing}, unexpected={extra}, duplicated={dupes})"
        )


def check_same_shape(a: Board, b: Board) -> None:
    if a.n != b.n:
        raise InvalidBoardError(f"board sizes differ: {a.n}x{a.n} vs {b.n}x{b.n}")


# ---------- instance generation ----------
def scramble(goal: Board, depth: int, seed: int) -> Board:
    """Random walk of ``depth`` blank moves from ``goal`` with no immediate backtrack."""
    rng = random.Random(seed)
    s = goal.copy()
    last: Optional[str] = None
    for _ in range(depth):
        cand = [d for d, _ in s.successors()]
        if last is not None and INVERSE[last] in cand and len(cand) > 1:
            cand.remove(INVERSE[last])
        d = rng.choice(cand)
        s.move(d)
        last = d
    return s


def make_unsolvable_variant(b: Board) -> Board:
    """Swap the first two non-blank tiles; flips permutation parity."""
    lst = list(b.flat)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return Board.from_flat(lst, b.n)


def parse_board(text: str, n: Optional[int] = None) -> Board:
    """'8 6 7 2 5 4 3 0 1' or '8,6,7/2,5,4/3,0,1' -> Board."""
    tokens = [t for t in re.split(r"[\s,;/]+", text.strip()) if t]
    try:
        cells = [int(t) for t in tokens]
    except ValueError as e:
        raise InvalidBoardError(f"cannot parse board {text!r}: {e}") from None
    return Board.from_flat(cells, n)
