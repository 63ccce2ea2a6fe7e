"""Literal decomposition into prefix, digits and type suffix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from digitlint.literal.radix import Radix, detect_radix

DIGIT_SEPARATOR: Final[str] = "_"
DECIMAL_POINT: Final[str] = "."

INT_SUFFIX_MARKERS: Final[frozenset[str]] = frozenset({"i", "u"})
FLOAT_SUFFIX_MARKERS: Final[frozenset[str]] = frozenset({"f"})

_DECIMAL_DIGITS: Final[str] = "0123456789"


@dataclass(frozen=True, slots=True)
class DigitInfo:
    """One literal split around its radix prefix and type suffix.

    Invariants:
    - ``prefix`` is ``None`` iff ``radix`` is ``Radix.DECIMAL``
    - ``digits`` holds no prefix or suffix characters, but keeps separators
      and (for floats) the decimal point
    - ``suffix`` includes the separator that immediately preceded it, if any
    """

    digits: str
    radix: Radix
    prefix: str | None = None
    suffix: str | None = None
    is_float: bool = False

    def __post_init__(self):
        if (self.prefix is None) != (self.radix == Radix.DECIMAL):
            raise ValueError(f"Prefix {self.prefix!r} does not match radix {self.radix}")
        if not self.digits:
            raise ValueError("DigitInfo requires a non-empty digit sequence")

    @property
    def integral_part(self) -> str:
        """Digits before the decimal point (all digits for integers)."""
        return self.digits.partition(DECIMAL_POINT)[0]

    @property
    def fractional_part(self) -> str | None:
        """Digits after the decimal point, or ``None`` when nothing follows one."""
        _, point, fraction = self.digits.partition(DECIMAL_POINT)
        if not point or not fraction:
            return None
        return fraction

    def grouping_hint(self) -> str:
        return grouping_hint(self)


def classify_literal(text: str, is_float: bool) -> DigitInfo:
    """Split the source text of one numeric literal into a `DigitInfo`.

    `text` must be the exact, lexically valid text of the literal and start
    with a decimal digit. Anything else is a caller bug and raises
    `ValueError`.
    """
    if not text or text[0] not in _DECIMAL_DIGITS:
        raise ValueError(f"Numeric literal must start with a decimal digit: {text!r}")

    radix = detect_radix(text)
    prefix = radix.prefix
    rest = text if prefix is None else text[len(prefix) :]
    if not rest:
        raise ValueError(f"Numeric literal has nothing after its radix prefix: {text!r}")

    markers = FLOAT_SUFFIX_MARKERS if is_float else INT_SUFFIX_MARKERS
    digits, suffix = rest, None
    previous = ""
    for index, ch in enumerate(rest):
        if ch in markers:
            boundary = index - 1 if previous == DIGIT_SEPARATOR else index
            digits, suffix = rest[:boundary], rest[boundary:]
            break
        previous = ch

    if not digits:
        raise ValueError(f"Numeric literal has an empty digit sequence: {text!r}")

    return DigitInfo(
        digits=digits,
        radix=radix,
        prefix=prefix,
        suffix=suffix,
        is_float=is_float,
    )


def strip_separators(digits: str) -> str:
    return digits.replace(DIGIT_SEPARATOR, "")


def group_from_right(digits: str, size: int) -> str:
    """Regroup `digits` counting from the units digit; the leading group may be short."""
    plain = strip_separators(digits)
    head = len(plain) % size
    groups = [plain[:head]] if head else []
    groups.extend(plain[start : start + size] for start in range(head, len(plain), size))
    return DIGIT_SEPARATOR.join(groups)


def group_from_left(digits: str, size: int) -> str:
    """Regroup `digits` counting from the decimal point; the trailing group may be short."""
    plain = strip_separators(digits)
    return DIGIT_SEPARATOR.join(plain[start : start + size] for start in range(0, len(plain), size))


def grouping_hint(info: DigitInfo) -> str:
    """Rewrite the literal with digits grouped by the radix's preferred size."""
    size = info.radix.group_size
    suffix = info.suffix or ""
    if DECIMAL_POINT in info.digits:
        integral, _, fraction = info.digits.partition(DECIMAL_POINT)
        return f"{group_from_right(integral, size)}{DECIMAL_POINT}{group_from_left(fraction, size)}{suffix}"
    return f"{info.prefix or ''}{group_from_right(info.digits, size)}{suffix}"


__all__ = [
    "DECIMAL_POINT",
    "DIGIT_SEPARATOR",
    "DigitInfo",
    "FLOAT_SUFFIX_MARKERS",
    "INT_SUFFIX_MARKERS",
    "classify_literal",
    "group_from_left",
    "group_from_right",
    "grouping_hint",
    "strip_separators",
]
