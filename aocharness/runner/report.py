from __future__ import annotations

from .types import ExecutionReport, PhaseResult, PhaseStatus


def format_duration(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.0f}us"


def format_outcome(result: PhaseResult) -> str:
    match result.status:
        case PhaseStatus.COMPUTED:
            return f"'{result.value}'"
        case PhaseStatus.SKIPPED:
            return "skipped"
        case PhaseStatus.FAILED:
            return f"FAILED: {result.error!r}"
        case _:
            raise AssertionError("Unreachable")


def format_report(report: ExecutionReport) -> str:
    title = f'Day {report.day:02}: "{report.title}"'
    sep = "=" * (len(title) + 2)

    lines = [
        sep,
        f" {title}",
        sep,
        f"Part 1: {format_outcome(report.part1)}",
        f"Part 2: {format_outcome(report.part2)}",
        "----",
        f"Parse Time:\t{format_duration(report.parse_duration_s)}",
        f"Time1:\t\t{format_duration(report.part1.duration_s)}",
        f"Time2:\t\t{format_duration(report.part2.duration_s)}",
        f"Total Time:\t{format_duration(report.total_duration_s)}",
    ]
    return "\n".join(lines)
