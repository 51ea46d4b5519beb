import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from aocharness.cases import UNCHECKED, CasesError, TestCase, build_table, parse_table
from aocharness.solution import SolutionContractError, load_solution

from .types import ConfigError, ExerciseConfig, ProjectConfig, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)


def load_project(path: str | Path) -> ProjectConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    project = _build_project_config(raw_file, pure_path.parent)
    logger.info("Loaded %d exercise(s) from %s", len(project), pure_path)
    return project


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: YAML parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc

    return raw_file


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: JSON parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_project_config(raw: Mapping[str, Any], base_dir: Path) -> ProjectConfig:
    keys = {"exercises", "cases_file", "root"}
    exercises: dict[int, ExerciseConfig] = {}

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"Can't process: {field}")

    if not "exercises" in raw:
        raise ConfigError("Missing 'exercises' field")

    if not isinstance(raw["exercises"], Mapping):
        raise ConfigError(f"'exercises' must be a mapping, got {type(raw['exercises'])}")

    if len(raw["exercises"]) < 1:
        raise ConfigError("There must be at least one exercise in the config file")

    root = base_dir
    if "root" in raw:
        if not isinstance(raw["root"], str) or len(raw["root"].strip()) < 1:
            raise ConfigError("'root' should be a non empty string")
        root = (base_dir / raw["root"].strip()).resolve()

    for key, fields in raw["exercises"].items():
        day = _normalize_day(key)

        if not isinstance(fields, Mapping):
            raise ConfigError(f"Exercise {key} must be a mapping")

        if day in exercises:
            raise ConfigError(f"Duplicate exercise id after normalization: {day}")

        exercises[day] = _build_exercise_config(day, fields, base_dir)

    if "cases_file" in raw:
        _merge_cases_file(exercises, base_dir, raw["cases_file"])

    return ProjectConfig(exercises=exercises, root=root)


def _normalize_day(key: Any) -> int:
    if isinstance(key, bool):
        raise ConfigError(f"Exercise id must be an integer, got {key!r}")

    if isinstance(key, int):
        day = key
    elif isinstance(key, str) and key.strip().isdigit():
        day = int(key.strip())
    else:
        raise ConfigError(f"Exercise id must be an integer, got {key!r}")

    if not 0 <= day <= 99:
        raise ConfigError(f"Exercise id must be in 0..99, got {day}")

    return day


def _build_exercise_config(
    day: int, fields: Mapping[str, Any], base_dir: Path
) -> ExerciseConfig:
    keys = {"solution", "cases"}
    cases: list[TestCase] = []

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{day:02}: Can't process: {field}")

    if not "solution" in fields:
        raise ConfigError(f"{day:02}: missing 'solution'")

    if not isinstance(fields["solution"], str):
        raise ConfigError(f"{day:02}: The solution should be a string")

    try:
        solution = load_solution(fields["solution"].strip(), base_dir)
    except SolutionContractError as exc:
        raise ConfigError(f"{day:02}: {exc}") from exc

    if solution.DAY != day:
        raise ConfigError(
            f"{day:02}: {fields['solution']} declares DAY = {solution.DAY}"
        )

    if "cases" in fields:
        if not isinstance(fields["cases"], list):
            raise ConfigError(f"{day:02}: Cases should be in a list.")

        for item in fields["cases"]:
            cases.append(_build_case(day, item))

    try:
        table = build_table((day, case) for case in cases)
    except CasesError as exc:
        raise ConfigError(str(exc)) from exc

    return ExerciseConfig(day, solution, table.get(day, ()))


def _build_case(day: int, fields: Any) -> TestCase:
    keys = {"name", "input", "part1", "part2"}

    if not isinstance(fields, Mapping):
        raise ConfigError(f"{day:02}: A case must be a mapping")

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{day:02}: Can't process case field: {field}")

    if not "input" in fields or not isinstance(fields["input"], str):
        raise ConfigError(f"{day:02}: A case needs a string 'input'")

    name = fields.get("name")
    if name is not None:
        name = str(name).strip()

    # Missing key leaves the part unchecked, an explicit null expects a skip
    return TestCase(
        name=name,
        input=fields["input"],
        part1=fields.get("part1", UNCHECKED),
        part2=fields.get("part2", UNCHECKED),
    )


def _merge_cases_file(
    exercises: dict[int, ExerciseConfig], base_dir: Path, value: Any
) -> None:
    if not isinstance(value, str) or len(value.strip()) < 1:
        raise ConfigError("'cases_file' should be a non empty string")

    path = base_dir / value.strip()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Can't read cases file: {path}") from exc

    try:
        parsed = parse_table(text)
        for day in parsed:
            if day not in exercises:
                raise ConfigError(f"{path}: cases for unknown exercise {day}")

        merged = build_table(
            (day, case)
            for day in sorted(exercises)
            for case in exercises[day].cases + parsed.get(day, ())
        )
    except CasesError as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    for day, exercise in exercises.items():
        exercise.cases = merged.get(day, ())
