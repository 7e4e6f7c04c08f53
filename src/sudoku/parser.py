"""Puzzle parser: convert common Sudoku notations into Grid values and back.

Supports:
- 81-character strings, `0` or `.` for empty cells (e.g. Kaggle / Norvig datasets)
- The same digits laid out over several lines with `|`, `-`, `+` separators
- 9x9 nested lists and flat lists of 81 values
- Puzzle records (dicts) carrying any of the above under a puzzle key
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .model import BOX_SIZE, EMPTY, GRID_SIZE, Grid

CELL_COUNT = GRID_SIZE * GRID_SIZE

EMPTY_MARKERS = {".", "0"}
SEPARATORS = {"|", "-", "+"}

PUZZLE_KEYS = ("puzzle", "quizzes", "quiz", "grid", "board")
SOLUTION_KEYS = ("solution", "solutions")


def parse_puzzle(puzzle: Any) -> Grid:
    """Build a Grid from a Grid, a string, a list of rows/cells, or a puzzle record."""
    if isinstance(puzzle, Grid):
        return puzzle
    if isinstance(puzzle, str):
        return Grid(_rows_from_cells(parse_cells(puzzle)))
    if isinstance(puzzle, dict):
        raw = find_field(puzzle, PUZZLE_KEYS)
        if raw is None:
            raise ValueError(f"Puzzle record has none of the keys {', '.join(PUZZLE_KEYS)}")
        return parse_puzzle(raw)
    if hasattr(puzzle, "tolist"):
        # numpy arrays and pandas values coming from the loader
        return parse_puzzle(puzzle.tolist())
    if isinstance(puzzle, (list, tuple)):
        if puzzle and all(isinstance(line, str) for line in puzzle):
            return parse_puzzle("\n".join(puzzle))
        if len(puzzle) == CELL_COUNT:
            return Grid(_rows_from_cells([_coerce_cell(v) for v in puzzle]))
        return Grid(tuple(tuple(_coerce_cell(v) for v in row) for row in puzzle))

    raise TypeError("parse_puzzle expects a Grid, string, list, or puzzle dictionary")


def parse_cells(text: str) -> List[int]:
    """Read cell values out of puzzle text, ignoring whitespace and box separators."""
    cells: List[int] = []
    for ch in text:
        if ch.isspace() or ch in SEPARATORS:
            continue
        if ch in EMPTY_MARKERS:
            cells.append(EMPTY)
        elif ch.isdigit():
            cells.append(int(ch))
        else:
            raise ValueError(f"Unexpected character {ch!r} in puzzle text")
    if len(cells) != CELL_COUNT:
        raise ValueError(f"Puzzle must have {CELL_COUNT} cells, got {len(cells)}")
    return cells


def find_field(record: Dict[str, Any], keys: Sequence[str]) -> Optional[Any]:
    for key in keys:
        value = record.get(key)
        if value is not None and not (isinstance(value, str) and not value.strip()):
            return value
    return None


def _rows_from_cells(cells: Sequence[int]) -> tuple:
    return tuple(
        tuple(cells[start:start + GRID_SIZE]) for start in range(0, CELL_COUNT, GRID_SIZE)
    )


def _coerce_cell(value: Any) -> int:
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        raise ValueError(f"Cannot read cell value {value!r}")
    if isinstance(value, float):
        # Tabular sources may widen ints to floats; anything fractional is malformed.
        if not value.is_integer():
            raise ValueError(f"Cannot read cell value {value!r}")
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        if value in EMPTY_MARKERS or not value:
            return EMPTY
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Cannot read cell value {value!r}") from None


def format_grid(grid: Grid, empty: str = ".") -> str:
    """Single-line 81-character form of the grid."""
    return "".join(str(value) if value != EMPTY else empty for _, _, value in grid.cells())


def render_grid(grid: Grid, empty: str = ".") -> str:
    """Multi-line form with box separators, readable by `parse_puzzle`."""
    lines: List[str] = []
    for r, row in enumerate(grid.rows):
        if r and r % BOX_SIZE == 0:
            lines.append("+".join(["-" * (2 * BOX_SIZE + 1)] * (GRID_SIZE // BOX_SIZE))[1:-1])
        chunks = []
        for start in range(0, GRID_SIZE, BOX_SIZE):
            chunks.append(" ".join(
                str(v) if v != EMPTY else empty for v in row[start:start + BOX_SIZE]
            ))
        lines.append(" | ".join(chunks))
    return "\n".join(lines)
