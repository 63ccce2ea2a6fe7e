"""Literal occurrences handed over by a host tool."""

from dataclasses import dataclass
from typing import Any, Final

_FLOAT_SUFFIXES: Final[tuple[str, ...]] = ("f32", "f64")
_RADIX_PREFIXES: Final[tuple[str, ...]] = ("0x", "0b", "0o")


@dataclass(frozen=True, slots=True)
class LiteralOccurrence:
    """One numeric literal as the host saw it in source.

    `text` is the literal's exact source text, `locus` is opaque to the engine
    and comes back on every diagnostic about this literal. `from_expansion`
    marks literals produced by macro or code generation.
    """

    text: str
    is_float: bool = False
    locus: Any = None
    from_expansion: bool = False

    @staticmethod
    def from_text(text: str, locus: Any = None) -> "LiteralOccurrence":
        """Build an occurrence for bare literal text, guessing the float flag from its shape."""
        return LiteralOccurrence(text=text, is_float=looks_like_float(text), locus=locus)

    @property
    def starts_with_digit(self) -> bool:
        return bool(self.text) and "0" <= self.text[0] <= "9"


def looks_like_float(text: str) -> bool:
    """Decimal literals with a point or an `f32`/`f64` suffix are floats."""
    if text.startswith(_RADIX_PREFIXES):
        return False
    return "." in text or text.endswith(_FLOAT_SUFFIXES)
