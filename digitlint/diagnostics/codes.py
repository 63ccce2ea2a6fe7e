"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None


LINT_UNREADABLE_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_UNREADABLE_LITERAL",
    message="long literal lacking separators",
    hint="consider using underscores to make literal more readable",
    severity="warning",
    category="lint/style",
)

LINT_INCONSISTENT_DIGIT_GROUPING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_INCONSISTENT_DIGIT_GROUPING",
    message="digits grouped inconsistently by underscores",
    hint="consider making each group three or four digits",
    severity="warning",
    category="lint/style",
)

LINT_LARGE_DIGIT_GROUPS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_LARGE_DIGIT_GROUPS",
    message="digit groups should be smaller",
    hint="consider using groups of three or four digits",
    severity="warning",
    category="lint/style",
)


class DiagnosticKind(StrEnum):
    UNREADABLE = "unreadable"
    INCONSISTENT_GROUPING = "inconsistent_grouping"
    LARGE_DIGIT_GROUPS = "large_digit_groups"

    @property
    def spec(self) -> DiagnosticSpec:
        return _SPECS_BY_KIND[self]


_SPECS_BY_KIND: Final[dict[DiagnosticKind, DiagnosticSpec]] = {
    DiagnosticKind.UNREADABLE: LINT_UNREADABLE_LITERAL,
    DiagnosticKind.INCONSISTENT_GROUPING: LINT_INCONSISTENT_DIGIT_GROUPING,
    DiagnosticKind.LARGE_DIGIT_GROUPS: LINT_LARGE_DIGIT_GROUPS,
}
