"""Sudoku core data structures: the immutable grid and empty-cell candidate records."""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

GRID_SIZE = 9
BOX_SIZE = 3

EMPTY = 0

# Candidate values. Stored cells may also hold EMPTY.
DIGITS: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))
POSSIBLE_VALUES = frozenset(DIGITS) | {EMPTY}

Rows = Tuple[Tuple[int, ...], ...]


def _check_index(index: int, name: str) -> None:
    if not isinstance(index, int) or not 0 <= index < GRID_SIZE:
        raise IndexError(f"{name} must be in 0..{GRID_SIZE - 1}, got {index!r}")


def _is_cell_value(value: object) -> bool:
    # bool and float compare equal to ints, so check the type first.
    return isinstance(value, int) and not isinstance(value, bool) and value in POSSIBLE_VALUES


def _check_digit(value: int) -> None:
    if not _is_cell_value(value) or value == EMPTY:
        raise ValueError(f"Value must be in 1..{GRID_SIZE}, got {value!r}")


def _box_origin(index: int) -> int:
    return (index // BOX_SIZE) * BOX_SIZE


@dataclass(frozen=True)
class Grid:
    """
    A 9x9 Sudoku grid. Zero marks an empty cell.

    The grid never changes after construction: `set` returns a new Grid that
    shares every row except the one it touches.
    """

    rows: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.rows)
        if len(rows) != GRID_SIZE:
            raise ValueError(f"Grid must have {GRID_SIZE} rows, got {len(rows)}")
        for index, row in enumerate(rows):
            if len(row) != GRID_SIZE:
                raise ValueError(
                    f"Row {index} must have {GRID_SIZE} cells, got {len(row)}"
                )
            for value in row:
                if not _is_cell_value(value):
                    raise ValueError(f"Invalid cell value {value!r} in row {index}")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls) -> "Grid":
        return cls(tuple((EMPTY,) * GRID_SIZE for _ in range(GRID_SIZE)))

    @classmethod
    def _with_rows(cls, rows: Rows) -> "Grid":
        # Rows come from an already validated grid; skip the 81-cell scan.
        grid = object.__new__(cls)
        object.__setattr__(grid, "rows", rows)
        return grid

    def get(self, row: int, col: int) -> int:
        _check_index(row, "row")
        _check_index(col, "col")
        return self.rows[row][col]

    def set(self, row: int, col: int, value: int) -> "Grid":
        _check_index(row, "row")
        _check_index(col, "col")
        _check_digit(value)

        current = self.rows[row]
        if current[col] == value:
            return self

        updated_row = current[:col] + (value,) + current[col + 1:]
        return Grid._with_rows(self.rows[:row] + (updated_row,) + self.rows[row + 1:])

    def row_values(self, row: int) -> Tuple[int, ...]:
        _check_index(row, "row")
        return self.rows[row]

    def col_values(self, col: int) -> Tuple[int, ...]:
        _check_index(col, "col")
        return tuple(row[col] for row in self.rows)

    def box_values(self, row: int, col: int) -> Tuple[int, ...]:
        """Values of the 3x3 box containing (row, col), in row-major order."""
        _check_index(row, "row")
        _check_index(col, "col")
        top, left = _box_origin(row), _box_origin(col)
        return tuple(
            self.rows[r][c]
            for r in range(top, top + BOX_SIZE)
            for c in range(left, left + BOX_SIZE)
        )

    @staticmethod
    def in_contact(row1: int, col1: int, row2: int, col2: int) -> bool:
        """True when the two cells share a row, a column or a box."""
        _check_index(row1, "row1")
        _check_index(col1, "col1")
        _check_index(row2, "row2")
        _check_index(col2, "col2")
        return (
            row1 == row2
            or col1 == col2
            or (row1 // BOX_SIZE == row2 // BOX_SIZE and col1 // BOX_SIZE == col2 // BOX_SIZE)
        )

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (row, col, value) for every cell, row-major."""
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                yield r, c, value

    def empty_count(self) -> int:
        return sum(row.count(EMPTY) for row in self.rows)

    def is_complete(self) -> bool:
        return self.empty_count() == 0

    def to_lists(self) -> List[List[int]]:
        return [list(row) for row in self.rows]


@dataclass(frozen=True)
class EmptyCell:
    row: int
    col: int
    candidates: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        _check_index(self.row, "row")
        _check_index(self.col, "col")
        candidates = tuple(self.candidates)
        for value in candidates:
            _check_digit(value)
        if len(set(candidates)) != len(candidates):
            raise ValueError(f"Duplicate candidates for ({self.row}, {self.col}): {candidates}")
        object.__setattr__(self, "candidates", candidates)

    def remove_candidate_if_present(self, value: int) -> "EmptyCell":
        if value not in self.candidates:
            return self
        return EmptyCell(self.row, self.col, tuple(v for v in self.candidates if v != value))


def candidates_for(grid: Grid, row: int, col: int) -> Tuple[int, ...]:
    """Ascending values not already used in the cell's row, column or box."""
    if grid.get(row, col) != EMPTY:
        raise ValueError(f"Cell ({row}, {col}) is not empty")
    used = set(grid.row_values(row)) | set(grid.col_values(col)) | set(grid.box_values(row, col))
    return tuple(v for v in DIGITS if v not in used)


def collect_empty_cells(grid: Grid) -> List[EmptyCell]:
    return [
        EmptyCell(r, c, candidates_for(grid, r, c))
        for r, c, value in grid.cells()
        if value == EMPTY
    ]


def is_valid_solution(grid: Grid) -> bool:
    """Check a complete grid holds every digit once per row, column and box."""
    expected = set(DIGITS)
    for index in range(GRID_SIZE):
        if set(grid.row_values(index)) != expected or set(grid.col_values(index)) != expected:
            return False
    for top in range(0, GRID_SIZE, BOX_SIZE):
        for left in range(0, GRID_SIZE, BOX_SIZE):
            if set(grid.box_values(top, left)) != expected:
                return False
    return True
