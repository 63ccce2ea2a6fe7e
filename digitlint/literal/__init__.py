"""Numeric literal decomposition and grouping hints."""

from digitlint.literal.digits import (
    DIGIT_SEPARATOR,
    DigitInfo,
    classify_literal,
    group_from_left,
    group_from_right,
    grouping_hint,
    strip_separators,
)
from digitlint.literal.radix import Radix, detect_radix

__all__ = [
    "DIGIT_SEPARATOR",
    "DigitInfo",
    "Radix",
    "classify_literal",
    "detect_radix",
    "group_from_left",
    "group_from_right",
    "grouping_hint",
    "strip_separators",
]
