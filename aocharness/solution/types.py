from __future__ import annotations

from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Solution(Protocol):
    """Contract every daily exercise implements.

    `parse` raises ParseError on malformed input. `part1` and `part2` return
    None when the part is intentionally not attempted; raising means failure.
    """

    DAY: ClassVar[int]
    TITLE: ClassVar[str]

    def parse(self, raw: str) -> Any: ...

    def part1(self, data: Any) -> Any | None: ...

    def part2(self, data: Any) -> Any | None: ...


class SolutionError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class PuzzleInputError(SolutionError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class ParseError(SolutionError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class SolutionContractError(SolutionError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
