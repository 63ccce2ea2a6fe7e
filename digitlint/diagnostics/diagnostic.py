"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from digitlint.diagnostics.codes import DiagnosticKind, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Advisory finding about one literal.

    `locus` is whatever the host passed in to locate the literal; it is carried
    through untouched.
    """

    kind: DiagnosticKind
    code: str
    message: str
    suggestion: str
    locus: Any = None
    severity: Severity = "warning"
    category: str | None = None

    @staticmethod
    def of(kind: DiagnosticKind, suggestion: str, locus: Any = None) -> "Diagnostic":
        spec = kind.spec
        return Diagnostic(
            kind=kind,
            code=spec.code,
            message=spec.message,
            suggestion=suggestion,
            locus=locus,
            severity=spec.severity,
            category=spec.category,
        )

    @property
    def hint(self) -> str:
        return f"consider: {self.suggestion}"
