from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable, Literal

from aocharness.solution import ParseError, Solution, read_input

from .report import format_report
from .types import ExecutionReport, PhaseResult

logger = logging.getLogger(__name__)


def timed(fn: Callable[..., Any], *args: Any) -> tuple[Any, float]:
    start = time.monotonic()
    result = fn(*args)
    return result, time.monotonic() - start


def parse_input(solution: Solution, raw: str) -> Any:
    try:
        return solution.parse(raw)
    except ParseError:
        raise
    except Exception as exc:
        raise ParseError(f"Day {solution.DAY:02}: invalid puzzle input ({exc})") from exc


def run_phase(fn: Callable[[Any], Any], data: Any) -> PhaseResult:
    start = time.monotonic()
    try:
        value = fn(data)
    except Exception as exc:
        return PhaseResult.failed(exc, time.monotonic() - start)
    duration = time.monotonic() - start

    if value is None:
        return PhaseResult.skipped(duration)
    return PhaseResult.computed(value, duration)


def try_part(
    solution: Solution, raw: str, part: Literal[1, 2]
) -> tuple[Any | None, float]:
    """
    Parse `raw` and solve a single part, returning the answer and the time
    spent in both steps. Handy for poking at small inputs while debugging.
    """
    match part:
        case 1:
            fn = solution.part1
        case 2:
            fn = solution.part2
        case _:
            raise ValueError(f"Part must be 1 or 2, got {part}")

    data, parse_time = timed(parse_input, solution, raw)
    answer, part_time = timed(fn, data)
    total = parse_time + part_time
    logger.debug("Day %02d part %d: %r in %.6fs", solution.DAY, part, answer, total)
    return answer, total


class Runner:
    def __init__(self, root: str | Path = ".", *, print_report: bool = True):
        self.root = Path(root)
        self.print_report = print_report

    def run(self, solution: Solution) -> ExecutionReport:
        logger.info("Running day %02d (%s)", solution.DAY, solution.TITLE)
        raw = read_input(solution, self.root)

        data, parse_time = timed(parse_input, solution, raw)
        logger.debug("Day %02d parsed in %.6fs", solution.DAY, parse_time)

        part1 = run_phase(solution.part1, data)
        part2 = run_phase(solution.part2, data)

        for name, result in (("part1", part1), ("part2", part2)):
            if result.error is not None:
                logger.warning(
                    "Day %02d %s failed: %r", solution.DAY, name, result.error
                )

        report = ExecutionReport(
            day=solution.DAY,
            title=solution.TITLE,
            parse_duration_s=parse_time,
            part1=part1,
            part2=part2,
        )

        if self.print_report:
            print(format_report(report))

        return report
