from __future__ import annotations

from pathlib import Path

import pytest

from aocharness.cases import (
    UNCHECKED,
    CaseFailure,
    CasesError,
    TestCase,
    build_table,
    common_tests,
    generate_tests,
    merge_tables,
    parse_table,
)

from sample_solutions import Crashing, HelloWorld, LazyHello, ReportRepair, Unfinished

DATA = Path(__file__).parent / "data"


# -------------------------
# Table building
# -------------------------


def test_single_case_may_be_nameless() -> None:
    table = build_table([(1, TestCase(None, "Hello", "hello", "HELLO"))])

    assert list(table) == [1]
    assert table[1][0].name is None


def test_nameless_case_among_several_is_rejected() -> None:
    with pytest.raises(CasesError):
        build_table(
            [
                (1, TestCase(None, "a")),
                (1, TestCase("other", "b")),
            ]
        )


def test_duplicate_case_names_are_rejected() -> None:
    with pytest.raises(CasesError):
        build_table(
            [
                (1, TestCase("small", "a", 1, 2)),
                (1, TestCase("small", "b", 3, 4)),
            ]
        )


def test_same_case_name_on_different_days_is_allowed() -> None:
    table = build_table(
        [
            (1, TestCase("small", "a")),
            (2, TestCase("small", "b")),
        ]
    )

    assert [case.name for case in table[1]] == ["small"]
    assert [case.name for case in table[2]] == ["small"]


@pytest.mark.parametrize("name", ["", "with space", "dash-ed", "double__under", "_lead", "trail_"])
def test_invalid_case_names_are_rejected(name: str) -> None:
    with pytest.raises(CasesError):
        build_table([(1, TestCase(name, "a"))])


@pytest.mark.parametrize("day", [-1, 100, "1"])
def test_invalid_exercise_ids_are_rejected(day) -> None:
    with pytest.raises(CasesError):
        build_table([(day, TestCase(None, "a"))])


def test_merge_tables_detects_cross_table_collision() -> None:
    first = build_table([(1, TestCase("small", "a"))])
    second = build_table([(1, TestCase("small", "b"))])

    with pytest.raises(CasesError):
        merge_tables(first, second)


# -------------------------
# Surface grammar
# -------------------------


def test_parse_table_reads_blocks() -> None:
    table = parse_table(
        """
        1:
          [small] - "1721\\n979\\n366\\n299\\n675\\n1456" => 514579 => 241861950;
          [empty] - "" => None => None;
        0:
          [] - 'Hello' => "hello" => _;
        """
    )

    assert list(table) == [0, 1]
    assert table[0] == (TestCase(None, "Hello", "hello", UNCHECKED),)
    small, empty = table[1]
    assert small.name == "small"
    assert small.input == "1721\n979\n366\n299\n675\n1456"
    assert (small.part1, small.part2) == (514579, 241861950)
    assert (empty.part1, empty.part2) == (None, None)


def test_parse_table_accepts_structured_literals() -> None:
    table = parse_table('3: [pairs] - "a;b=>c" => (1, -2) => ["x", {"k": 1}];')

    case = table[3][0]
    assert case.input == "a;b=>c"
    assert case.part1 == (1, -2)
    assert case.part2 == ["x", {"k": 1}]


def test_parse_table_accepts_triple_quoted_input() -> None:
    table = parse_table('2:\n  [multi] - """ab\ncd""" => 2 => _;\n')

    assert table[2][0].input == "ab\ncd"


@pytest.mark.parametrize(
    "text",
    [
        '1: [a] - 12 => 1 => 2;',
        '1: [a] - "x" => 1;',
        '1: [a] - "x" => 1 => 2',
        '1: [a] "x" => 1 => 2;',
        '1:',
        'x: [a] - "x" => 1 => 2;',
        '1: [a] - "x" => foo() => 2;',
        '1: [a] - "x" => => 2;',
        '1: [a] - "x" => 1 => 2; [a] - "y" => 1 => 2;',
        '1: [] - "x" => 1 => 2; [b] - "y" => 1 => 2;',
        '1: [a] - "unterminated => 1 => 2;',
    ],
)
def test_parse_table_errors(text: str) -> None:
    with pytest.raises(CasesError):
        parse_table(text)


# -------------------------
# Generated example tests
# -------------------------


HELLO = TestCase(None, "Hello", "hello", "HELLO")


def test_generated_test_passes_for_matching_solution() -> None:
    (test,) = generate_tests(HelloWorld, [HELLO])

    assert test.name == "day_00"
    test()


def test_generated_test_fails_when_part_skips_unexpectedly() -> None:
    (test,) = generate_tests(LazyHello, [HELLO])

    assert test.name == "day_01"
    with pytest.raises(CaseFailure, match="part1"):
        test()


def test_generated_test_mismatch_fails() -> None:
    (test,) = generate_tests(HelloWorld, [TestCase(None, "Hello", "HELLO", "HELLO")])

    with pytest.raises(CaseFailure):
        test()


def test_explicit_skip_requires_none() -> None:
    ok, bad = generate_tests(
        Unfinished,
        [
            TestCase("skips", "Hello", "hello", None),
            TestCase("answers", "Hello", None, UNCHECKED),
        ],
    )

    ok()
    with pytest.raises(CaseFailure, match="expected skip"):
        bad()


def test_omitted_expectation_is_unchecked() -> None:
    (test,) = generate_tests(HelloWorld, [TestCase(None, "Hello")])

    test()


def test_parse_failure_fails_the_case() -> None:
    (test,) = generate_tests(ReportRepair, [TestCase(None, "not numbers", 1, 2)])

    with pytest.raises(CaseFailure, match="parse failed"):
        test()


def test_generated_tests_are_independent() -> None:
    tests = generate_tests(
        ReportRepair,
        [
            TestCase("wrong", "1721\n299", 1, UNCHECKED),
            TestCase("right", "1721\n299", 514579, None),
        ],
    )

    assert [t.name for t in tests] == ["day_01_wrong", "day_01_right"]
    with pytest.raises(CaseFailure):
        tests[0]()
    tests[1]()


# -------------------------
# Common checks
# -------------------------


def test_common_tests_names_do_not_collide_with_cases() -> None:
    names = [t.name for t in common_tests(HelloWorld, DATA)]

    assert names == ["day_00__real_input_parses", "day_00__phases_complete"]


def test_common_tests_pass_for_working_solution() -> None:
    for test in common_tests(ReportRepair, DATA):
        test()


def test_common_tests_accept_skips() -> None:
    for test in common_tests(Unfinished, DATA):
        test()


def test_common_checks_fail_independently() -> None:
    parses, phases = common_tests(Crashing, DATA)

    parses()
    with pytest.raises(CaseFailure, match="part1 raised"):
        phases()


def test_common_checks_fail_on_missing_input(tmp_path: Path) -> None:
    for test in common_tests(HelloWorld, tmp_path):
        with pytest.raises(CaseFailure):
            test()


def test_parse_table_ignores_uneven_indentation() -> None:
    table = parse_table(
        '1:\n    [a] - "x" => 1 => 2;\n  [b] - "y" => 1 => 2;\n3: [c] - "z" => _ => _;'
    )

    assert [case.name for case in table[1]] == ["a", "b"]
    assert table[3][0].input == "z"


def test_parse_table_error_reports_table_line() -> None:
    with pytest.raises(CasesError, match="line 2"):
        parse_table('1:\n  [a] "x" => 1 => 2;\n')


def test_generate_tests_rejects_duplicate_names() -> None:
    with pytest.raises(CasesError):
        generate_tests(HelloWorld, [TestCase("a", "x"), TestCase("a", "y")])


def test_generate_tests_rejects_several_nameless_cases() -> None:
    with pytest.raises(CasesError):
        generate_tests(HelloWorld, [TestCase(None, "x"), TestCase(None, "y")])
