#!/usr/bin/env python3
"""Check digit grouping of numeric literals given on the command line or in a file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from digitlint.diagnostics import format_diagnostic
from digitlint.lint import LintOptions, LiteralOccurrence, run_lint

logger = logging.getLogger("digitlint.scripts.check_literals")


def _occurrences_from_args(literals: list[str]) -> list[LiteralOccurrence]:
    return [LiteralOccurrence.from_text(text, locus=f"arg[{idx}]") for idx, text in enumerate(literals)]


def _occurrences_from_file(path: Path, *, show_progress: bool) -> list[LiteralOccurrence]:
    lines = path.read_text(encoding="utf-8").splitlines()
    iterator = tqdm(lines, desc=path.name, unit="line") if show_progress else lines
    occurrences: list[LiteralOccurrence] = []
    for lineno, line in enumerate(iterator, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        occurrences.append(LiteralOccurrence.from_text(text, locus=f"{path}:{lineno}"))
    return occurrences


def main() -> int:
    parser = argparse.ArgumentParser(description="Check digit grouping of numeric literals")
    parser.add_argument("literals", nargs="*", help="Literal source texts, e.g. 0xFFFFFFFF or 1_234.5678")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read literals from a file, one per line (blank lines and # comments ignored)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars when reading from a file",
    )
    parser.add_argument("--strict", action="store_true", help="Exit with status 1 when any warning is emitted")
    parser.add_argument("--verbose", action="store_true", help="Log skipped literals and run totals")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    occurrences = _occurrences_from_args(args.literals)
    if args.file is not None:
        occurrences.extend(_occurrences_from_file(args.file, show_progress=not args.no_progress))
    if not occurrences:
        parser.error("no literals given")

    result = run_lint(occurrences, LintOptions())
    for diagnostic in result.diagnostics:
        print(format_diagnostic(diagnostic))

    logger.info("%d literal(s) checked, %d warning(s)", len(result.checked), len(result.diagnostics))
    if args.strict and result.has_warnings:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
