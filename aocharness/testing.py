"""
pytest integration.

Every example case and every common check becomes its own test item:

    @parametrize_solution(Day01, parse_table(EXAMPLES)[1])
    def test_day01(generated):
        generated()
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pytest

from aocharness.cases import TestCase, common_tests, generate_tests
from aocharness.solution import Solution, validate_solution


def solution_params(
    solution: Solution,
    cases: Iterable[TestCase] = (),
    root: str | Path = ".",
    *,
    common: bool = True,
) -> list:
    validate_solution(solution)
    generated = generate_tests(solution, cases)
    if common:
        generated += common_tests(solution, root)

    return [pytest.param(test, id=test.name) for test in generated]


def parametrize_solution(
    solution: Solution,
    cases: Iterable[TestCase] = (),
    root: str | Path = ".",
    *,
    common: bool = True,
):
    return pytest.mark.parametrize(
        "generated", solution_params(solution, cases, root, common=common)
    )
