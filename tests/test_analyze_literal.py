import pytest

from digitlint.diagnostics import (
    LINT_INCONSISTENT_DIGIT_GROUPING,
    LINT_LARGE_DIGIT_GROUPS,
    LINT_UNREADABLE_LITERAL,
    DiagnosticKind,
)
from digitlint.lint import analyze_literal, parts_consistent
from digitlint.literal import strip_separators
from tests._literal_cases import CLEAN_CASES, FLAGGED_CASES, LiteralCase, case_id


@pytest.mark.parametrize("case", CLEAN_CASES, ids=case_id)
def test_clean_literals_emit_nothing(case: LiteralCase) -> None:
    assert analyze_literal(case.text, case.is_float) == []


@pytest.mark.parametrize("case", FLAGGED_CASES, ids=case_id)
def test_flagged_literals_emit_one_diagnostic(case: LiteralCase) -> None:
    diagnostics = analyze_literal(case.text, case.is_float)

    assert len(diagnostics) == 1
    assert diagnostics[0].kind == case.expected_kind
    assert diagnostics[0].suggestion == case.expected_suggestion


@pytest.mark.parametrize("case", FLAGGED_CASES, ids=case_id)
def test_suggestions_are_clean_when_analyzed_again(case: LiteralCase) -> None:
    suggestion = analyze_literal(case.text, case.is_float)[0].suggestion

    assert analyze_literal(suggestion, case.is_float) == []


def test_unreadable_suggestion_keeps_digits() -> None:
    for digits in ["12345", "61864918973511", "100000000000"]:
        suggestion = analyze_literal(digits, False)[0].suggestion
        assert strip_separators(suggestion) == digits


def test_short_decimal_literals_emit_nothing() -> None:
    for digits in ["0", "42", "999", "1000", "9999"]:
        assert analyze_literal(digits, False) == []


def test_diagnostics_carry_codes_and_messages() -> None:
    unreadable = analyze_literal("61864918973511", False)[0]
    inconsistent = analyze_literal("618_64_9189_73_511", False)[0]
    large = analyze_literal("6186491_8973511", False)[0]

    assert unreadable.code == LINT_UNREADABLE_LITERAL.code
    assert unreadable.message == "long literal lacking separators"
    assert inconsistent.code == LINT_INCONSISTENT_DIGIT_GROUPING.code
    assert inconsistent.message == "digits grouped inconsistently by underscores"
    assert large.code == LINT_LARGE_DIGIT_GROUPS.code
    assert large.message == "digit groups should be smaller"
    assert {d.severity for d in (unreadable, inconsistent, large)} == {"warning"}
    assert large.hint == "consider: 61_864_918_973_511"


def test_locus_is_passed_through_unchanged() -> None:
    locus = ("src/main.rs", 3, 9)

    diagnostics = analyze_literal("0xFFFFFFFF", False, locus)

    assert diagnostics[0].locus is locus


def test_integral_failure_stops_before_fraction() -> None:
    diagnostics = analyze_literal("618_64_9189_73_511.12345", True)

    assert [d.kind for d in diagnostics] == [DiagnosticKind.INCONSISTENT_GROUPING]


def test_fractional_part_is_checked_from_the_point_outward() -> None:
    assert analyze_literal("1.234_5", True) == []
    assert analyze_literal("1.23_456", True)[0].kind == DiagnosticKind.INCONSISTENT_GROUPING
    assert analyze_literal("1.23456_78901", True)[0].kind == DiagnosticKind.LARGE_DIGIT_GROUPS


def test_ungrouped_long_fraction_with_ungrouped_integral_is_unreadable() -> None:
    diagnostics = analyze_literal("1.23456", True)

    assert [d.kind for d in diagnostics] == [DiagnosticKind.UNREADABLE]


def test_analyze_literal_rejects_non_digit_start() -> None:
    with pytest.raises(ValueError):
        analyze_literal("x123", False)


@pytest.mark.parametrize(
    ("integral", "fraction", "integral_size", "fractional_size", "expected"),
    [
        ("12", "34", 0, 0, True),
        ("1_234", "567", 3, 0, True),
        ("1_234", "5678", 3, 0, False),
        ("123", "456_7", 0, 3, True),
        ("1234", "567_8", 0, 3, False),
        ("1_234", "567_8", 3, 3, True),
        ("1_234", "5678_9", 3, 4, False),
    ],
)
def test_parts_consistent_table(
    integral: str,
    fraction: str,
    integral_size: int,
    fractional_size: int,
    expected: bool,
) -> None:
    assert parts_consistent(integral, fraction, integral_size, fractional_size) is expected
