"""Lint rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from digitlint.diagnostics import Diagnostic
from digitlint.lint.literal_grouping import analyze_literal
from digitlint.lint.source import LiteralOccurrence


class LintRule(Protocol):
    """Per-literal lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    def run(self, occurrence: LiteralOccurrence) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class LiteralDigitGroupingRule:
    """Flags long ungrouped literals, uneven grouping and oversized digit groups."""

    code: str = "LINT_LITERAL_DIGIT_GROUPING"
    name: str = "styleLiteralDigitGrouping"
    category: str = "style"

    def run(self, occurrence: LiteralOccurrence) -> list[Diagnostic]:
        return analyze_literal(occurrence.text, occurrence.is_float, occurrence.locus)


def default_lint_rules() -> tuple[LintRule, ...]:
    rules: list[LintRule] = [LiteralDigitGroupingRule()]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if not rule.code.startswith("LINT_"):
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix."
            )
        if rule.code in seen:
            raise ValueError(f"Lint rule code `{rule.code}` is registered more than once.")
        seen.add(rule.code)
