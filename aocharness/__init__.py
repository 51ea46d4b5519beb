from .cases import UNCHECKED, TestCase, build_table, parse_table
from .runner import ExecutionReport, PhaseResult, PhaseStatus, Runner
from .solution import ParseError, PuzzleInputError, Solution, input_path

__all__ = [
    "Solution",
    "ParseError",
    "PuzzleInputError",
    "input_path",
    "Runner",
    "ExecutionReport",
    "PhaseResult",
    "PhaseStatus",
    "TestCase",
    "UNCHECKED",
    "build_table",
    "parse_table",
]
