from __future__ import annotations

import argparse
import logging
import sys

from aocharness.cases import GeneratedTest, common_tests, generate_tests
from aocharness.config import ConfigError, ExerciseConfig, ProjectConfig, load_project
from aocharness.runner import Runner
from aocharness.solution import SolutionError

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _setup_logging(args.verbose)

        match args.command:
            case "run":
                return cmd_run(args)
            case "list":
                return cmd_list(args)
            case "check":
                return cmd_check(args)
            case _:
                return 2

    except (ConfigError, KeyError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_run(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    runner = Runner(project.root)
    code = 0

    for exercise in _select(project, args.days):
        try:
            report = runner.run(exercise.solution)
        except SolutionError as exc:
            print(
                f"Day {exercise.day:02} - {exercise.solution.TITLE!r} Error: {exc}",
                file=sys.stderr,
            )
            code = 1
            continue

        if report.failed:
            code = 1

    return code


def cmd_list(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    for exercise in project:
        print(f"{exercise.day:02} {exercise.solution.TITLE}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    failed = 0

    for exercise in _select(project, args.days):
        tests = generate_tests(exercise.solution, exercise.cases)
        tests += common_tests(exercise.solution, project.root)

        for test in tests:
            if not _check(test):
                failed += 1

    return 1 if failed else 0


def _check(test: GeneratedTest) -> bool:
    try:
        test()
    except Exception as exc:
        print(f"FAIL {test.name}: {exc}")
        return False

    print(f"OK {test.name}")
    return True


def _select(project: ProjectConfig, days: list[int]) -> list[ExerciseConfig]:
    if len(days) == 0:
        return list(project)

    for day in days:
        if not project.has_exercise(day):
            raise ConfigError(f"Unknown exercise: {day:02}")

    return [project.get_exercise(day) for day in days]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
