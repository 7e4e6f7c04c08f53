"""Top-level Sudoku solve interface.

Expose `solve_puzzle(puzzle)` that accepts either a Grid or any puzzle notation
understood by `src.sudoku.parser.parse_puzzle`.
"""

from typing import Any, Optional

from src.sudoku import solver_core
from src.sudoku.model import Grid
from src.sudoku.parser import parse_puzzle
from src.utils.trace import Tracer


def solve_puzzle(puzzle: Any, tracer: Optional[Tracer] = None) -> Optional[Grid]:
    """
    Solve a puzzle and return the completed grid, or None when it has no solution.
    Accepts:
      - Grid instances (used directly)
      - Puzzle strings, nested lists, or puzzle dictionaries (parsed via `parse_puzzle`)
    Pass a tracer to record the solver steps; none are kept otherwise.
    """
    grid = puzzle if isinstance(puzzle, Grid) else parse_puzzle(puzzle)
    return solver_core.solve(grid, tracer=tracer)


__all__ = ["solve_puzzle"]
