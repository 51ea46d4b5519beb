from .report import format_duration, format_report
from .runner import Runner, parse_input, run_phase, timed, try_part
from .types import ExecutionReport, PhaseResult, PhaseStatus

__all__ = [
    "Runner",
    "ExecutionReport",
    "PhaseResult",
    "PhaseStatus",
    "format_report",
    "format_duration",
    "parse_input",
    "run_phase",
    "timed",
    "try_part",
]
