import pytest

from tilesearch.domains.board import Board
from tilesearch.search.bfs import distances_from


@pytest.fixture(scope="session")
def p8_distances():
    """Move distance to the standard 8-puzzle goal for every solvable board."""
    return distances_from(Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]]))
