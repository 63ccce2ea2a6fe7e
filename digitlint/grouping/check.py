"""Consistency checks for separator placement in one digit sequence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from digitlint.literal.digits import DECIMAL_POINT, DIGIT_SEPARATOR

READABILITY_THRESHOLD: Final[int] = 4
"""Longest digit run that may go without separators."""

MAX_GROUP_SIZE: Final[int] = 4
"""Largest digit group size that is still considered readable."""


class GroupingFailure(StrEnum):
    UNREADABLE = "unreadable"
    INCONSISTENT = "inconsistent"
    GROUPS_TOO_LARGE = "groups_too_large"


@dataclass(frozen=True, slots=True)
class GroupingOutcome:
    """Result of checking one digit sequence.

    Exactly one of `group_size` and `failure` is set. A `group_size` of 0 means
    the sequence carries no separators and is short enough not to need any.
    """

    group_size: int | None = None
    failure: GroupingFailure | None = None

    def __post_init__(self):
        if (self.group_size is None) == (self.failure is None):
            raise ValueError("GroupingOutcome must carry either a group size or a failure")
        if self.group_size is not None and self.group_size < 0:
            raise ValueError("Group size cannot be negative")

    @staticmethod
    def acceptable(group_size: int) -> "GroupingOutcome":
        return GroupingOutcome(group_size=group_size)

    @staticmethod
    def failed(failure: GroupingFailure) -> "GroupingOutcome":
        return GroupingOutcome(failure=failure)

    @property
    def is_acceptable(self) -> bool:
        return self.failure is None


def separator_positions(digits: str) -> list[int]:
    """Separator indices counted from the least-significant end (rightmost char is 0)."""
    return [index for index, ch in enumerate(reversed(digits)) if ch == DIGIT_SEPARATOR]


def check_grouping(digits: str) -> GroupingOutcome:
    """Check separator placement in `digits`, which must not contain a decimal point.

    Positions are character offsets from the units end, so two neighbouring
    separators in a uniform grouping are `group_size + 1` apart. The leading
    group may be shorter than the others but never longer.
    """
    if DECIMAL_POINT in digits:
        raise ValueError(f"Split floats at the decimal point before checking grouping: {digits!r}")

    positions = separator_positions(digits)
    if not positions:
        if len(digits) > READABILITY_THRESHOLD:
            return GroupingOutcome.failed(GroupingFailure.UNREADABLE)
        return GroupingOutcome.acceptable(0)

    group_size = positions[0]
    uniform = all(farther - nearer == group_size + 1 for nearer, farther in zip(positions, positions[1:]))
    leading_fits = len(digits) - positions[-1] <= group_size + 1

    if not (uniform and leading_fits):
        return GroupingOutcome.failed(GroupingFailure.INCONSISTENT)
    if group_size > MAX_GROUP_SIZE:
        return GroupingOutcome.failed(GroupingFailure.GROUPS_TOO_LARGE)
    return GroupingOutcome.acceptable(group_size)


__all__ = [
    "MAX_GROUP_SIZE",
    "READABILITY_THRESHOLD",
    "GroupingFailure",
    "GroupingOutcome",
    "check_grouping",
    "separator_positions",
]
