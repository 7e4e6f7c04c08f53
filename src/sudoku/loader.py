import json
import os
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .model import GRID_SIZE
from .parser import CELL_COUNT, PUZZLE_KEYS, SOLUTION_KEYS, find_field
from src.utils.io import load_json

TEXT_SUFFIXES = (".txt", ".sdk")
SUPPORTED_SUFFIXES = (".json", ".jsonl", ".csv", ".parquet") + TEXT_SUFFIXES


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .json, .jsonl, .csv, .parquet and plain text.
    Returns a list of puzzle records with at least "id" and "puzzle" keys;
    "solution" is kept when the source provides one.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    # Default ids keep the suffix so set.json and set.csv stay distinct.
    source_name = Path(file_path).name

    def _coerce(value: Any) -> Any:
        # Parquet cells may hold numpy arrays.
        if hasattr(value, "tolist"):
            return value.tolist()
        return value

    def _normalize_record(record: Dict[str, Any], index: int) -> Dict[str, Any]:
        record = {str(k): _coerce(v) for k, v in record.items()}

        puzzle = find_field(record, PUZZLE_KEYS)
        if puzzle is not None:
            record["puzzle"] = puzzle
        solution = find_field(record, SOLUTION_KEYS)
        if solution is not None:
            record["solution"] = solution

        record_id = record.get("id")
        if record_id is None or str(record_id).strip() == "":
            record["id"] = f"{source_name}-{index}"
        else:
            record["id"] = str(record_id)
        return record

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        normalized = []
        for i, r in enumerate(records):
            if isinstance(r, (str, list)):
                r = {"puzzle": r}
            if isinstance(r, dict):
                normalized.append(_normalize_record(r, i))
        return normalized

    def _read_json_lines() -> List[Any]:
        data = []
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    obj = json.loads(line)
                except json.JSONDecodeError:
                    continue
                data.append(obj)
        return data

    def _is_single_grid(payload: List[Any]) -> bool:
        # A bare 9x9 list of rows, as opposed to a list of puzzles.
        return len(payload) == GRID_SIZE and all(
            isinstance(row, list)
            and len(row) == GRID_SIZE
            and not any(isinstance(v, (list, dict)) for v in row)
            for row in payload
        )

    def _count_cells(text: str) -> int:
        return sum(1 for ch in text if ch.isdigit() or ch == ".")

    def _read_text() -> List[Any]:
        with open(file_path, "r", encoding="utf-8") as f:
            lines = [line.split("#", 1)[0].strip() for line in f]
        lines = [line for line in lines if line]
        # A grid drawn over several lines is one puzzle, otherwise one puzzle per line.
        if len(lines) > 1 and _count_cells("".join(lines)) == CELL_COUNT:
            return [{"puzzle": "\n".join(lines)}]
        return [{"puzzle": line} for line in lines]

    # Case 1: Parquet File (Binary)
    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 2: CSV File (e.g. Kaggle "quizzes,solutions")
    if file_path.endswith(".csv"):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 3: JSON File (array or object)
    if file_path.endswith(".json"):
        try:
            payload = load_json(Path(file_path))
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            return _normalize_all(_read_json_lines())
        if isinstance(payload, list):
            if _is_single_grid(payload):
                return _normalize_all([payload])
            return _normalize_all(payload)
        if isinstance(payload, dict):
            return _normalize_all([payload])
        return []

    # Case 4: Plain text, one puzzle per line
    if file_path.endswith(TEXT_SUFFIXES):
        return _normalize_all(_read_text())

    # Case 5: JSONL File (Text)
    return _normalize_all(_read_json_lines())
