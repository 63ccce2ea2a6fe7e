"""Diagnostics."""

from digitlint.diagnostics.codes import (
    LINT_INCONSISTENT_DIGIT_GROUPING,
    LINT_LARGE_DIGIT_GROUPS,
    LINT_UNREADABLE_LITERAL,
    DiagnosticKind,
    DiagnosticSpec,
)
from digitlint.diagnostics.diagnostic import Diagnostic, Severity
from digitlint.diagnostics.report import collect_diagnostics, format_diagnostic, has_warnings

__all__ = [
    "LINT_INCONSISTENT_DIGIT_GROUPING",
    "LINT_LARGE_DIGIT_GROUPS",
    "LINT_UNREADABLE_LITERAL",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
    "has_warnings",
]
