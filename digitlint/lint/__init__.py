"""Literal digit-grouping lint."""

from digitlint.lint.literal_grouping import analyze_literal, parts_consistent
from digitlint.lint.options import LintOptions
from digitlint.lint.results import LintRunResult
from digitlint.lint.rules import (
    LintRule,
    LiteralDigitGroupingRule,
    default_lint_rules,
    validate_lint_rules,
)
from digitlint.lint.runner import run_lint
from digitlint.lint.source import LiteralOccurrence, looks_like_float

__all__ = [
    "LintOptions",
    "LintRule",
    "LintRunResult",
    "LiteralDigitGroupingRule",
    "LiteralOccurrence",
    "analyze_literal",
    "default_lint_rules",
    "looks_like_float",
    "parts_consistent",
    "run_lint",
    "validate_lint_rules",
]
