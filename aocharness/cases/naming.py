from __future__ import annotations

import re

from .types import CasesError

CASE_NAME_RE = re.compile(r"[A-Za-z0-9]+(?:_[A-Za-z0-9]+)*")

# Common check names use a double underscore, which no case name can contain
COMMON_SEPARATOR = "__"


def day_prefix(day: int) -> str:
    return f"day_{day:02}"


def case_test_name(day: int, case_name: str | None) -> str:
    if case_name is None:
        return day_prefix(day)
    return f"{day_prefix(day)}_{case_name}"


def common_test_name(day: int, check: str) -> str:
    return f"{day_prefix(day)}{COMMON_SEPARATOR}{check}"


def validate_case_name(day: int, name: str) -> str:
    if not isinstance(name, str):
        raise CasesError(f"Day {day:02}: case name should be a string, got {type(name)}")

    if CASE_NAME_RE.fullmatch(name) is None:
        raise CasesError(
            f"Day {day:02}: invalid case name {name!r}\n Expected letters, digits and single underscores"
        )

    return name
