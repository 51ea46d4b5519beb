from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aocharness")

    parser.add_argument(
        "--config",
        default="aocharness.yml",
        help="Path to config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run exercises")
    run.add_argument(
        "days",
        nargs="*",
        type=int,
        help="Exercise ids (all when omitted)",
    )

    # list
    subparsers.add_parser("list", help="List exercises")

    # check
    check = subparsers.add_parser("check", help="Run example cases and common checks")
    check.add_argument(
        "days",
        nargs="*",
        type=int,
        help="Exercise ids (all when omitted)",
    )

    return parser
