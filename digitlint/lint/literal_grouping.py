"""Digit-grouping analysis of a single numeric literal."""

from __future__ import annotations

from typing import Any, Final

from digitlint.diagnostics import Diagnostic, DiagnosticKind
from digitlint.grouping import GroupingFailure, GroupingOutcome, check_grouping
from digitlint.literal import DigitInfo, classify_literal

_KIND_BY_FAILURE: Final[dict[GroupingFailure, DiagnosticKind]] = {
    GroupingFailure.UNREADABLE: DiagnosticKind.UNREADABLE,
    GroupingFailure.INCONSISTENT: DiagnosticKind.INCONSISTENT_GROUPING,
    GroupingFailure.GROUPS_TOO_LARGE: DiagnosticKind.LARGE_DIGIT_GROUPS,
}


def analyze_literal(text: str, is_float: bool, locus: Any = None) -> list[Diagnostic]:
    """Check the digit grouping of one literal; returns at most one diagnostic.

    Floats are checked part by part: the integral digits from the units digit
    outward, the fractional digits from the decimal point outward. Only when
    both parts pass on their own are their group sizes compared.
    """
    info = classify_literal(text, is_float)
    if not info.is_float:
        return _diagnose(info, check_grouping(info.digits), locus)

    integral = info.integral_part
    integral_outcome = check_grouping(integral)
    if integral_outcome.failure is not None:
        return _diagnose(info, integral_outcome, locus)

    fraction = info.fractional_part
    if fraction is None:
        return []

    integral_size = integral_outcome.group_size or 0
    fractional_outcome = check_grouping(fraction[::-1])
    if fractional_outcome.failure is GroupingFailure.UNREADABLE and integral_size > 0:
        # An ungrouped fraction next to a grouped integral part is a mismatch
        # between the two parts; let the cross-check report it.
        fractional_outcome = GroupingOutcome.acceptable(0)
    if fractional_outcome.failure is not None:
        return _diagnose(info, fractional_outcome, locus)

    fractional_size = fractional_outcome.group_size or 0
    if parts_consistent(integral, fraction, integral_size, fractional_size):
        return []
    return [Diagnostic.of(DiagnosticKind.INCONSISTENT_GROUPING, info.grouping_hint(), locus)]


def parts_consistent(integral: str, fraction: str, integral_size: int, fractional_size: int) -> bool:
    """Whether the group sizes on either side of the decimal point agree."""
    match (integral_size, fractional_size):
        case (0, 0):
            return True
        case (_, 0):
            return len(fraction) <= integral_size
        case (0, _):
            return len(integral) <= fractional_size
        case _:
            return integral_size == fractional_size


def _diagnose(info: DigitInfo, outcome: GroupingOutcome, locus: Any) -> list[Diagnostic]:
    if outcome.failure is None:
        return []
    return [Diagnostic.of(_KIND_BY_FAILURE[outcome.failure], info.grouping_hint(), locus)]


__all__ = ["analyze_literal", "parts_consistent"]
