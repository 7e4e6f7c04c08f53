import pytest

from src.sudoku.model import Grid
from src.sudoku.parser import format_grid, parse_cells, parse_puzzle, render_grid

EASY = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"


def test_parse_dotted_string():
    grid = parse_puzzle(EASY)
    assert grid.row_values(0) == (5, 3, 0, 0, 7, 0, 0, 0, 0)
    assert grid.get(8, 8) == 9
    assert format_grid(grid) == EASY


def test_parse_zero_string_matches_dotted():
    assert parse_puzzle(EASY.replace(".", "0")) == parse_puzzle(EASY)


def test_parse_rendered_grid_with_separators():
    grid = parse_puzzle(EASY)
    text = render_grid(grid)
    assert "|" in text and "+" in text
    assert parse_puzzle(text) == grid


def test_parse_row_strings_and_flat_list():
    grid = parse_puzzle(EASY)
    rows = [EASY[i:i + 9] for i in range(0, 81, 9)]
    assert parse_puzzle(rows) == grid
    assert parse_puzzle([int(ch) if ch != "." else 0 for ch in EASY]) == grid


def test_parse_nested_list_and_grid_passthrough():
    grid = parse_puzzle(EASY)
    assert parse_puzzle(grid.to_lists()) == grid
    assert parse_puzzle(grid) is grid


def test_parse_record_uses_known_keys():
    assert parse_puzzle({"quizzes": EASY.replace(".", "0")}) == parse_puzzle(EASY)
    with pytest.raises(ValueError):
        parse_puzzle({"id": "no-grid"})


def test_parse_rejects_bad_text():
    with pytest.raises(ValueError):
        parse_cells(EASY[:-1])
    with pytest.raises(ValueError):
        parse_cells(EASY[:-1] + "x")


def test_parse_rejects_unsupported_type():
    with pytest.raises(TypeError):
        parse_puzzle(42)


def test_format_grid_custom_empty_marker():
    assert format_grid(Grid.empty(), empty="0") == "0" * 81


def test_parse_rejects_fractional_and_bool_cells():
    with pytest.raises(ValueError):
        parse_puzzle([2.7] + [0] * 80)
    with pytest.raises(ValueError):
        parse_puzzle([True] + [0] * 80)
    with pytest.raises(ValueError):
        parse_puzzle([float("nan")] + [0] * 80)


def test_parse_accepts_integral_floats():
    grid = parse_puzzle([7.0] + [0.0] * 80)
    assert grid.get(0, 0) == 7
    assert type(grid.get(0, 0)) is int
