from __future__ import annotations

import sys
from pathlib import Path

import pytest

from aocharness.solution import (
    PuzzleInputError,
    SolutionContractError,
    input_path,
    load_solution,
    read_input,
    validate_solution,
)

from sample_solutions import HelloWorld, Inline, Missing, ReportRepair

DATA = Path(__file__).parent / "data"


@pytest.mark.parametrize("day", range(100))
def test_input_path_is_zero_padded(day: int) -> None:
    assert input_path(day) == Path("inputs") / f"DAY_{day:02}.txt"
    assert input_path(day).name == "DAY_" + str(day).zfill(2) + ".txt"


def test_input_path_uses_root(tmp_path: Path) -> None:
    assert input_path(3, tmp_path) == tmp_path / "inputs" / "DAY_03.txt"


@pytest.mark.parametrize("day", [-1, 100, True, "1"])
def test_input_path_rejects_invalid_days(day) -> None:
    with pytest.raises(ValueError):
        input_path(day)


def test_read_input_reads_day_file() -> None:
    assert read_input(HelloWorld, DATA) == "Hello"


def test_read_input_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(PuzzleInputError):
        read_input(Missing, tmp_path)


def test_read_input_directory_raises(tmp_path: Path) -> None:
    (tmp_path / "inputs" / "DAY_07.txt").mkdir(parents=True)
    with pytest.raises(PuzzleInputError):
        read_input(Missing, tmp_path)


def test_read_input_prefers_get_input(tmp_path: Path) -> None:
    assert read_input(Inline, tmp_path) == "Inline"


def test_parse_is_deterministic() -> None:
    raw = read_input(ReportRepair, DATA)
    assert ReportRepair.parse(raw) == ReportRepair.parse(raw)


def test_validate_solution_accepts_sample() -> None:
    assert validate_solution(ReportRepair) is ReportRepair


def test_validate_solution_rejects_bad_day() -> None:
    class Bad(HelloWorld):
        DAY = 100

    with pytest.raises(SolutionContractError):
        validate_solution(Bad)


def test_validate_solution_rejects_missing_title() -> None:
    class Bad:
        DAY = 1

        @staticmethod
        def parse(raw):
            return raw

        @staticmethod
        def part1(data):
            return None

        @staticmethod
        def part2(data):
            return None

    with pytest.raises(SolutionContractError):
        validate_solution(Bad)


def test_validate_solution_rejects_missing_part() -> None:
    class Bad:
        DAY = 1
        TITLE = "no parts"

        @staticmethod
        def parse(raw):
            return raw

    with pytest.raises(SolutionContractError):
        validate_solution(Bad)


def test_load_solution_by_reference() -> None:
    assert load_solution("sample_solutions:ReportRepair") is ReportRepair


@pytest.mark.parametrize(
    "target",
    ["sample_solutions", "sample_solutions:Nope", "no_such_module_xyz:Day", ":Day"],
)
def test_load_solution_errors(target: str) -> None:
    with pytest.raises(SolutionContractError):
        load_solution(target)


def test_load_solution_from_search_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(sys, "path", list(sys.path))
    (tmp_path / "local_day03.py").write_text(
        "class Day03:\n"
        "    DAY = 3\n"
        "    TITLE = 'Local'\n"
        "    parse = staticmethod(lambda raw: raw)\n"
        "    part1 = staticmethod(lambda data: None)\n"
        "    part2 = staticmethod(lambda data: None)\n",
        encoding="utf-8",
    )

    solution = load_solution("local_day03:Day03", tmp_path)

    assert solution.TITLE == "Local"
    assert str(tmp_path) in sys.path
