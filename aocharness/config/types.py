from dataclasses import dataclass, field
from pathlib import Path

from aocharness.cases import TestCase
from aocharness.solution import Solution


@dataclass
class ExerciseConfig:
    day: int
    solution: Solution
    cases: tuple[TestCase, ...] = ()


@dataclass
class ProjectConfig:
    exercises: dict[int, ExerciseConfig]
    root: Path = field(default_factory=Path.cwd)

    def __iter__(self):
        for day in sorted(self.exercises):
            yield self.exercises[day]

    def __len__(self):
        return len(self.exercises)

    def has_exercise(self, day: int) -> bool:
        return day in self.exercises

    def get_exercise(self, day: int) -> ExerciseConfig:
        if not self.has_exercise(day):
            raise KeyError(day)

        return self.exercises[day]

    def days(self) -> list[int]:
        return sorted(self.exercises.keys())


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
