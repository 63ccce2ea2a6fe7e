"""Digit-grouping lint engine for numeric literals."""

from digitlint.diagnostics import Diagnostic, DiagnosticKind
from digitlint.grouping import GroupingFailure, GroupingOutcome, check_grouping
from digitlint.lint import LiteralOccurrence, analyze_literal, run_lint
from digitlint.literal import DigitInfo, Radix, classify_literal, grouping_hint

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DigitInfo",
    "GroupingFailure",
    "GroupingOutcome",
    "LiteralOccurrence",
    "Radix",
    "analyze_literal",
    "check_grouping",
    "classify_literal",
    "grouping_hint",
    "run_lint",
]
