"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from digitlint.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_warnings(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "warning" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    location = "" if diagnostic.locus is None else f"{diagnostic.locus}: "
    return f"{location}{diagnostic.severity}[{diagnostic.code}]: {diagnostic.message} ({diagnostic.hint})"
