"""Separator placement checks over digit sequences."""

from digitlint.grouping.check import (
    MAX_GROUP_SIZE,
    READABILITY_THRESHOLD,
    GroupingFailure,
    GroupingOutcome,
    check_grouping,
    separator_positions,
)

__all__ = [
    "MAX_GROUP_SIZE",
    "READABILITY_THRESHOLD",
    "GroupingFailure",
    "GroupingOutcome",
    "check_grouping",
    "separator_positions",
]
