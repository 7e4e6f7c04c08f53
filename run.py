"""CLI entrypoint: load puzzle(s), run solver, and report metrics."""

import argparse
import csv
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from tqdm import tqdm

from solver import solve_puzzle
from src.sudoku.loader import SUPPORTED_SUFFIXES, load_puzzles
from src.sudoku.model import Grid
from src.sudoku.parser import find_field, format_grid, parse_puzzle, render_grid, SOLUTION_KEYS
from src.utils.io import save_json
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

RESULT_FIELDS = ["id", "puzzle", "solution", "status", "matches_expected", "steps", "backtracks"]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Run the Sudoku solver on one or more puzzle files")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=os.environ.get("SUDOKU_DATA_PATH"),
        help="Path to a puzzle file or directory of puzzle files (default: $SUDOKU_DATA_PATH)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional .csv or .json path to write results")
    parser.add_argument("--trace-dir", type=Path, default=None, help="Write one solver trace CSV per puzzle here")
    parser.add_argument("--no-trace", action="store_true", help="Disable step tracing (steps are reported as 0)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    args = parser.parse_args(argv)
    if args.input is None:
        parser.error("an input path is required (argument or SUDOKU_DATA_PATH)")
    args.input = Path(args.input)
    return args


def collect_puzzles(input_path: Path) -> List[Dict[str, Any]]:
    puzzles: List[Dict[str, Any]] = []
    if input_path.is_file():
        puzzles = load_puzzles(str(input_path))
    elif input_path.is_dir():
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in SUPPORTED_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
    else:
        raise ValueError(f"Input path {input_path} is neither file nor directory")
    return puzzles


def check_expected(solution: Optional[Grid], puzzle: Dict[str, Any]) -> Optional[bool]:
    """Compare against the solution shipped with the puzzle, if any."""
    expected = find_field(puzzle, SOLUTION_KEYS)
    if expected is None:
        return None
    if solution is None:
        return False
    return parse_puzzle(expected) == solution


def format_result(
    puzzle: Dict[str, Any],
    grid: Optional[Grid],
    solution: Optional[Grid],
    summary: Dict[str, Any],
) -> Dict[str, Any]:
    return {
        "id": puzzle.get("id", "unknown"),
        "puzzle": format_grid(grid) if grid is not None else "",
        "solution": format_grid(solution) if solution is not None else "",
        "status": "solved" if solution is not None else "unsolved",
        "matches_expected": check_expected(solution, puzzle),
        "steps": summary.get("num_assignments", summary["total_steps"]),
        "backtracks": summary.get("num_backtracks", 0),
    }


def write_results_csv(results: List[Dict[str, Any]], output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow({k: ("" if r.get(k) is None else r[k]) for k in RESULT_FIELDS})


def write_results(results: List[Dict[str, Any]], output_path: Path):
    if output_path.suffix == ".json":
        save_json(output_path, results)
    else:
        write_results_csv(results, output_path)


def _trace_path(trace_dir: Path, puzzle_id: str, taken: Set[Path]) -> Path:
    safe_id = "".join(ch if ch.isalnum() or ch in "-_." else "_" for ch in puzzle_id)
    path = trace_dir / f"{safe_id}.csv"
    suffix = 2
    while path in taken:
        path = trace_dir / f"{safe_id}-{suffix}.csv"
        suffix += 1
    taken.add(path)
    return path


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    puzzles = collect_puzzles(args.input)
    results = []
    trace_paths: Set[Path] = set()

    for puzzle in tqdm(puzzles, desc="Solving", unit="puzzle", disable=args.no_progress):
        reset_tracer()
        if args.no_trace:
            enable_tracing(False)
        tracer = get_tracer()
        puzzle_id = str(puzzle.get("id", "unknown"))

        try:
            grid = parse_puzzle(puzzle)
            solution = solve_puzzle(grid, tracer=tracer)
            result = format_result(puzzle, grid, solution, tracer.summary())
        except (ValueError, TypeError, IndexError) as e:
            tqdm.write(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "puzzle": "",
                "solution": "",
                "status": "error",
                "matches_expected": None,
                "steps": -1,
                "backtracks": -1,
            })
            continue

        results.append(result)
        if args.trace_dir and tracer.steps:
            tracer.to_csv(_trace_path(args.trace_dir, puzzle_id, trace_paths))

        if not args.output:
            print(f"{puzzle_id}: {result['status']} ({result['steps']} steps)")
            if solution is not None:
                print(render_grid(solution))

    if args.output:
        write_results(results, args.output)
        print(f"Results written to {args.output} ({len(results)} puzzles)")

    return results


if __name__ == "__main__":
    main()
