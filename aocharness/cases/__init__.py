from .common import common_tests
from .generator import generate_tests, verify_case
from .naming import case_test_name, common_test_name
from .table import CaseTable, build_table, merge_tables, parse_table
from .types import UNCHECKED, CaseFailure, CasesError, GeneratedTest, TestCase

__all__ = [
    "TestCase",
    "GeneratedTest",
    "CaseTable",
    "UNCHECKED",
    "CasesError",
    "CaseFailure",
    "build_table",
    "merge_tables",
    "parse_table",
    "generate_tests",
    "verify_case",
    "common_tests",
    "case_test_name",
    "common_test_name",
]
