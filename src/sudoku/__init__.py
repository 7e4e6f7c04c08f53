"""Sudoku grid model, puzzle parsing, and constraint-propagation solver core."""

from .model import EmptyCell, Grid, candidates_for, collect_empty_cells, is_valid_solution
from .solver_core import by_candidate_count, solve
from .parser import format_grid, parse_puzzle, render_grid

__all__ = [
    "EmptyCell",
    "Grid",
    "candidates_for",
    "collect_empty_cells",
    "is_valid_solution",
    "by_candidate_count",
    "solve",
    "format_grid",
    "parse_puzzle",
    "render_grid",
]
