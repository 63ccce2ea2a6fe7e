"""Numeral bases recognised from a literal's prefix."""

from enum import StrEnum


class Radix(StrEnum):
    BINARY = "binary"
    OCTAL = "octal"
    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"

    @property
    def group_size(self) -> int:
        """Reasonable digit group size for this radix."""
        if self in (Radix.BINARY, Radix.HEXADECIMAL):
            return 4
        return 3

    @property
    def prefix(self) -> str | None:
        return _PREFIXES.get(self)


_PREFIXES: dict[Radix, str] = {
    Radix.HEXADECIMAL: "0x",
    Radix.BINARY: "0b",
    Radix.OCTAL: "0o",
}


def detect_radix(text: str) -> Radix:
    for radix, prefix in _PREFIXES.items():
        if text.startswith(prefix):
            return radix
    return Radix.DECIMAL


__all__ = ["Radix", "detect_radix"]
