"""Lint run configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Host-side filters applied before literals reach the rules."""

    skip_expansions: bool = True
    skip_non_digit_start: bool = True
