from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any

from .types import PuzzleInputError, Solution, SolutionContractError

MIN_DAY = 0
MAX_DAY = 99


def input_path(day: int, root: str | Path = ".") -> Path:
    if isinstance(day, bool) or not isinstance(day, int):
        raise ValueError(f"Day must be an int, got {type(day)}")

    if not MIN_DAY <= day <= MAX_DAY:
        raise ValueError(f"Day must be in {MIN_DAY}..{MAX_DAY}, got {day}")

    return Path(root) / "inputs" / f"DAY_{day:02}.txt"


def read_input(solution: Solution, root: str | Path = ".") -> str:
    # A solution can ship its own input instead of the conventional file
    getter = getattr(solution, "get_input", None)
    if callable(getter):
        try:
            return getter()
        except OSError as exc:
            raise PuzzleInputError(f"Day {solution.DAY:02}: {exc}") from exc

    path = input_path(solution.DAY, root)

    if not path.exists():
        raise PuzzleInputError(f"Missing puzzle input: {path}")

    if not path.is_file():
        raise PuzzleInputError(f"Puzzle input is not a file: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleInputError(f"Unreadable puzzle input: {path}") from exc


def validate_solution(solution: Any) -> Solution:
    name = getattr(solution, "__name__", repr(solution))

    if not hasattr(solution, "DAY"):
        raise SolutionContractError(f"{name}: missing 'DAY'")

    day = solution.DAY
    if isinstance(day, bool) or not isinstance(day, int):
        raise SolutionContractError(f"{name}: DAY should be an int, got {type(day)}")

    if not MIN_DAY <= day <= MAX_DAY:
        raise SolutionContractError(
            f"{name}: DAY should be in {MIN_DAY}..{MAX_DAY}, got {day}"
        )

    if not isinstance(getattr(solution, "TITLE", None), str):
        raise SolutionContractError(f"{name}: TITLE should be a string")

    for method in ("parse", "part1", "part2"):
        if not callable(getattr(solution, method, None)):
            raise SolutionContractError(f"{name}: '{method}' is not callable")

    return solution


def load_solution(target: str, search_path: str | Path | None = None) -> Solution:
    module_name, sep, attr = target.partition(":")

    if not sep or not module_name.strip() or not attr.strip():
        raise SolutionContractError(
            f"Invalid solution reference: {target!r}\n Expected format: package.module:Attribute"
        )

    # Exercise projects are usually not installed, their modules live beside the config
    if search_path is not None and str(search_path) not in sys.path:
        sys.path.insert(0, str(search_path))

    try:
        module = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise SolutionContractError(f"Can't import module '{module_name}'") from exc

    obj: Any = module
    for part in attr.strip().split("."):
        if not hasattr(obj, part):
            raise SolutionContractError(f"'{module_name}' has no attribute '{attr}'")
        obj = getattr(obj, part)

    return validate_solution(obj)
