from __future__ import annotations

from typing import Any, Callable, Iterable

from aocharness.runner import parse_input
from aocharness.solution import Solution, SolutionError

from .naming import case_test_name
from .table import build_table
from .types import UNCHECKED, CaseFailure, GeneratedTest, TestCase


def verify_case(solution: Solution, case: TestCase, name: str | None = None) -> None:
    """Parse the case input, then check each part against its expectation."""
    name = name or case_test_name(solution.DAY, case.name)

    try:
        data = parse_input(solution, case.input)
    except SolutionError as exc:
        raise CaseFailure(name, f"parse failed: {exc}") from exc

    _check_part(name, "part1", solution.part1, data, case.part1)
    _check_part(name, "part2", solution.part2, data, case.part2)


def _check_part(
    name: str, label: str, fn: Callable[[Any], Any], data: Any, expected: Any
) -> None:
    actual = fn(data)

    if expected is UNCHECKED:
        return

    if expected is None:
        if actual is not None:
            raise CaseFailure(name, f"{label}: expected skip (None), got {actual!r}")
        return

    if actual is None:
        raise CaseFailure(name, f"{label}: expected {expected!r}, got skip (None)")

    if actual != expected:
        raise CaseFailure(name, f"{label}: expected {expected!r}, got {actual!r}")


def generate_tests(solution: Solution, cases: Iterable[TestCase]) -> list[GeneratedTest]:
    tests: list[GeneratedTest] = []
    table = build_table((solution.DAY, case) for case in cases)

    for case in table.get(solution.DAY, ()):
        name = case_test_name(solution.DAY, case.name)
        tests.append(GeneratedTest(name, _bind(solution, case, name)))

    return tests


def _bind(solution: Solution, case: TestCase, name: str) -> Callable[[], None]:
    def check() -> None:
        verify_case(solution, case, name)

    return check
