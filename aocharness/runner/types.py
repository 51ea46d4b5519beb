from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PhaseStatus(Enum):
    COMPUTED = "computed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class PhaseResult:
    status: PhaseStatus
    duration_s: float
    value: Any = None
    error: BaseException | None = None

    @classmethod
    def computed(cls, value: Any, duration_s: float) -> PhaseResult:
        return cls(PhaseStatus.COMPUTED, duration_s, value=value)

    @classmethod
    def skipped(cls, duration_s: float) -> PhaseResult:
        return cls(PhaseStatus.SKIPPED, duration_s)

    @classmethod
    def failed(cls, error: BaseException, duration_s: float) -> PhaseResult:
        return cls(PhaseStatus.FAILED, duration_s, error=error)

    @property
    def ok(self) -> bool:
        return self.status != PhaseStatus.FAILED


@dataclass(frozen=True)
class ExecutionReport:
    day: int
    title: str
    parse_duration_s: float
    part1: PhaseResult
    part2: PhaseResult

    @property
    def total_duration_s(self) -> float:
        return self.parse_duration_s + self.part1.duration_s + self.part2.duration_s

    @property
    def failed(self) -> list[str]:
        parts = {"part1": self.part1, "part2": self.part2}
        return [name for name, result in parts.items() if not result.ok]
