"""Backtracking Sudoku solver with most-constrained-cell ordering and forward checking."""

from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from .model import EmptyCell, Grid, collect_empty_cells
from src.utils.trace import Tracer

EmptyCells = Tuple[EmptyCell, ...]
OrderKey = Callable[[EmptyCell], Any]


def by_candidate_count(cell: EmptyCell) -> int:
    return len(cell.candidates)


def solve(
    grid: Grid,
    order_key: OrderKey = by_candidate_count,
    tracer: Optional[Tracer] = None,
) -> Optional[Grid]:
    """
    Solve a Sudoku grid by backtracking over its empty cells.
    Returns the first complete grid found, or None if the puzzle has no solution.
    The input grid is never modified. Steps are recorded only when a tracer is passed.
    """
    tracer = tracer or Tracer(enabled=False)
    empty_cells = _order_empty_cells(collect_empty_cells(grid), order_key)

    result = _backtrack(grid, empty_cells, order_key, tracer)
    if result is not None:
        tracer.log_solution_found(filled_cells=len(empty_cells))
    return result


def _backtrack(
    grid: Grid,
    empty_cells: EmptyCells,
    order_key: OrderKey = by_candidate_count,
    tracer: Optional[Tracer] = None,
) -> Optional[Grid]:
    tracer = tracer or Tracer(enabled=False)
    if not empty_cells:
        return grid

    # Cells arrive sorted, so the head is the most constrained one.
    head, tail = empty_cells[0], empty_cells[1:]
    if not head.candidates:
        tracer.log_backtrack(head.row, head.col, reason="No candidates left")
        return None

    for value in head.candidates:
        updated_grid = grid.set(head.row, head.col, value)
        tracer.log_assign(
            row=head.row,
            col=head.col,
            value=value,
            candidate_count=len(head.candidates),
            empty_cells=len(tail),
        )

        updated_tail = _forward_check(head, value, tail, tracer)
        result = _backtrack(
            updated_grid, _order_empty_cells(updated_tail, order_key), order_key, tracer
        )
        if result is not None:
            return result

    tracer.log_backtrack(head.row, head.col)
    return None


def _forward_check(
    assigned: EmptyCell,
    value: int,
    empty_cells: Sequence[EmptyCell],
    tracer: Optional[Tracer] = None,
) -> EmptyCells:
    """Drop `value` from every cell in contact with `assigned`; other cells are reused as is."""
    tracer = tracer or Tracer(enabled=False)
    pruned = 0
    updated = []
    for cell in empty_cells:
        if Grid.in_contact(assigned.row, assigned.col, cell.row, cell.col):
            reduced = cell.remove_candidate_if_present(value)
            if reduced is not cell:
                pruned += 1
            cell = reduced
        updated.append(cell)
    if pruned:
        tracer.log_forward_check(assigned.row, assigned.col, value, cells_pruned=pruned)
    return tuple(updated)


def _order_empty_cells(empty_cells: Iterable[EmptyCell], order_key: OrderKey) -> EmptyCells:
    # sorted() is stable: ties keep their current relative order.
    return tuple(sorted(empty_cells, key=order_key))
