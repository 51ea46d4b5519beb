from __future__ import annotations

from pathlib import Path

from aocharness.runner import parse_input
from aocharness.solution import Solution, SolutionError, read_input

from .naming import common_test_name
from .types import CaseFailure, GeneratedTest

REAL_INPUT_PARSES = "real_input_parses"
PHASES_COMPLETE = "phases_complete"


def common_tests(solution: Solution, root: str | Path = ".") -> list[GeneratedTest]:
    day = solution.DAY
    parses_name = common_test_name(day, REAL_INPUT_PARSES)
    phases_name = common_test_name(day, PHASES_COMPLETE)

    def real_input_parses() -> None:
        _load(solution, root, parses_name)

    def phases_complete() -> None:
        data = _load(solution, root, phases_name)
        errors: list[str] = []

        for label, fn in (("part1", solution.part1), ("part2", solution.part2)):
            try:
                fn(data)
            except Exception as exc:
                errors.append(f"{label} raised {exc!r}")

        if errors:
            raise CaseFailure(phases_name, "; ".join(errors))

    return [
        GeneratedTest(parses_name, real_input_parses),
        GeneratedTest(phases_name, phases_complete),
    ]


def _load(solution: Solution, root: str | Path, name: str):
    try:
        return parse_input(solution, read_input(solution, root))
    except SolutionError as exc:
        raise CaseFailure(name, str(exc)) from exc
