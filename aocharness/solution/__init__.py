from .contract import input_path, load_solution, read_input, validate_solution
from .types import (
    ParseError,
    PuzzleInputError,
    Solution,
    SolutionContractError,
    SolutionError,
)

__all__ = [
    "Solution",
    "SolutionError",
    "PuzzleInputError",
    "ParseError",
    "SolutionContractError",
    "input_path",
    "read_input",
    "validate_solution",
    "load_solution",
]
