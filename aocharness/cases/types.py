from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class _Unchecked:
    """Expectation left out of a test case: the part runs but isn't compared."""

    _instance: _Unchecked | None = None

    def __new__(cls) -> _Unchecked:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHECKED"

    def __bool__(self) -> bool:
        return False


UNCHECKED: Any = _Unchecked()


@dataclass(frozen=True)
class TestCase:
    # Not a pytest test class
    __test__ = False

    name: str | None
    input: str
    part1: Any = UNCHECKED
    part2: Any = UNCHECKED


@dataclass(frozen=True)
class GeneratedTest:
    name: str
    check: Callable[[], None]

    def __call__(self) -> None:
        self.check()


class CasesError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class CaseFailure(AssertionError):
    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"{name}: {message}")
        self.name = name
