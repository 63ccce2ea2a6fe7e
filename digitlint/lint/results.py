"""Lint run result carriers."""

from dataclasses import dataclass

from digitlint.diagnostics import Diagnostic, has_warnings
from digitlint.lint.source import LiteralOccurrence


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Diagnostics from one lint run, plus which literals were looked at."""

    diagnostics: list[Diagnostic]
    checked: tuple[LiteralOccurrence, ...]
    skipped: tuple[LiteralOccurrence, ...]

    @property
    def has_warnings(self) -> bool:
        return has_warnings(self.diagnostics)
