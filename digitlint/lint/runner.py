"""Lint runner over literal occurrences supplied by a host."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from digitlint.diagnostics import Diagnostic
from digitlint.lint.options import LintOptions
from digitlint.lint.results import LintRunResult
from digitlint.lint.rules import LintRule, default_lint_rules, validate_lint_rules
from digitlint.lint.source import LiteralOccurrence

logger = logging.getLogger(__name__)


def run_lint(
    occurrences: Iterable[LiteralOccurrence],
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run every rule over each literal the host filters let through."""
    resolved_options = options if options is not None else LintOptions()
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    diagnostics: list[Diagnostic] = []
    checked: list[LiteralOccurrence] = []
    skipped: list[LiteralOccurrence] = []
    for occurrence in occurrences:
        reason = _skip_reason(occurrence, resolved_options)
        if reason is not None:
            logger.debug("Skipping literal %r: %s", occurrence.text, reason)
            skipped.append(occurrence)
            continue
        checked.append(occurrence)
        for rule in resolved_rules:
            diagnostics.extend(rule.run(occurrence))

    logger.debug(
        "Checked %d literal(s), skipped %d, %d diagnostic(s)",
        len(checked),
        len(skipped),
        len(diagnostics),
    )
    return LintRunResult(
        diagnostics=diagnostics,
        checked=tuple(checked),
        skipped=tuple(skipped),
    )


def _skip_reason(occurrence: LiteralOccurrence, options: LintOptions) -> str | None:
    if options.skip_expansions and occurrence.from_expansion:
        return "produced by macro expansion"
    if options.skip_non_digit_start and not occurrence.starts_with_digit:
        return "does not start with a decimal digit"
    return None
