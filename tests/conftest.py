"""Shared puzzle fixtures."""

import pytest

from src.sudoku.model import Grid

CLASSIC_PUZZLES = [
    [
        [7, 0, 0, 3, 0, 0, 2, 0, 6],
        [0, 0, 2, 0, 5, 8, 0, 0, 0],
        [8, 3, 0, 0, 0, 7, 0, 4, 9],
        [3, 9, 0, 0, 0, 0, 8, 5, 4],
        [0, 0, 0, 7, 0, 3, 0, 0, 0],
        [1, 2, 8, 0, 0, 0, 0, 6, 7],
        [6, 8, 0, 5, 0, 0, 0, 2, 3],
        [0, 0, 0, 8, 9, 0, 4, 0, 0],
        [4, 0, 5, 0, 0, 1, 0, 0, 8],
    ],
    [
        [6, 3, 4, 0, 1, 5, 0, 0, 0],
        [0, 0, 0, 6, 4, 0, 5, 0, 9],
        [5, 0, 1, 2, 7, 8, 0, 0, 3],
        [4, 0, 7, 3, 0, 9, 0, 8, 1],
        [9, 8, 0, 4, 2, 1, 0, 5, 7],
        [3, 0, 2, 8, 0, 7, 4, 9, 6],
        [0, 2, 5, 0, 8, 0, 9, 0, 0],
        [8, 6, 3, 0, 9, 0, 1, 7, 2],
        [0, 4, 0, 0, 3, 2, 0, 6, 0],
    ],
    [
        [0, 3, 4, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 6, 0, 0, 5, 0, 9],
        [5, 0, 1, 0, 7, 0, 0, 0, 3],
        [4, 0, 7, 0, 0, 0, 0, 8, 1],
        [9, 0, 0, 0, 2, 0, 0, 5, 7],
        [3, 0, 2, 8, 0, 7, 0, 9, 6],
        [0, 2, 5, 0, 8, 0, 0, 0, 0],
        [8, 6, 3, 0, 9, 0, 1, 0, 2],
        [0, 4, 0, 0, 3, 0, 0, 6, 0],
    ],
    [
        [0, 6, 7, 8, 0, 0, 5, 4, 0],
        [2, 0, 0, 0, 3, 0, 0, 0, 7],
        [0, 4, 9, 0, 7, 0, 8, 0, 0],
        [0, 3, 0, 0, 0, 7, 9, 8, 4],
        [0, 0, 0, 2, 0, 5, 0, 0, 0],
        [7, 8, 6, 4, 0, 0, 0, 1, 0],
        [0, 0, 1, 0, 5, 0, 4, 2, 0],
        [8, 0, 0, 0, 4, 0, 0, 0, 3],
        [0, 9, 3, 0, 0, 2, 1, 5, 0],
    ],
    [
        [0, 4, 8, 3, 0, 6, 0, 5, 0],
        [0, 0, 9, 0, 2, 0, 6, 0, 8],
        [0, 0, 2, 0, 1, 0, 0, 0, 7],
        [2, 0, 6, 0, 3, 0, 0, 0, 5],
        [0, 0, 3, 0, 0, 9, 8, 0, 0],
        [8, 0, 0, 0, 7, 4, 9, 0, 2],
        [5, 0, 0, 0, 8, 0, 7, 0, 0],
        [9, 0, 4, 0, 6, 0, 5, 0, 0],
        [0, 8, 0, 5, 0, 2, 1, 6, 0],
    ],
    [
        [4, 0, 0, 2, 0, 0, 0, 3, 0],
        [0, 0, 0, 0, 0, 3, 0, 0, 4],
        [0, 6, 0, 7, 0, 0, 0, 0, 9],
        [0, 0, 1, 8, 5, 0, 6, 0, 0],
        [0, 0, 5, 4, 0, 0, 2, 0, 0],
        [0, 0, 7, 0, 1, 0, 3, 0, 0],
        [1, 0, 0, 0, 0, 9, 0, 5, 0],
        [3, 0, 0, 1, 0, 0, 0, 0, 0],
        [0, 7, 0, 0, 0, 4, 0, 0, 3],
    ],
]


def make_solved_grid() -> Grid:
    # Shifted-row pattern: every row, column and box holds 1..9 once.
    return Grid(tuple(
        tuple((r * 3 + r // 3 + c) % 9 + 1 for c in range(9)) for r in range(9)
    ))


@pytest.fixture
def solved_grid() -> Grid:
    return make_solved_grid()


@pytest.fixture(params=range(len(CLASSIC_PUZZLES)), ids=lambda i: f"classic-{i + 1}")
def classic_grid(request) -> Grid:
    return Grid(CLASSIC_PUZZLES[request.param])
