import pytest

from digitlint.grouping import (
    MAX_GROUP_SIZE,
    READABILITY_THRESHOLD,
    GroupingFailure,
    GroupingOutcome,
    check_grouping,
    separator_positions,
)


def test_thresholds_are_fixed() -> None:
    assert READABILITY_THRESHOLD == 4
    assert MAX_GROUP_SIZE == 4


def test_separator_positions_count_from_units_end() -> None:
    assert separator_positions("1_234_567") == [3, 7]
    assert separator_positions("FFFF_FFFF") == [4]
    assert separator_positions("1234") == []


@pytest.mark.parametrize("digits", ["0", "7", "42", "999", "1000", "9999", "FFFF"])
def test_short_ungrouped_digits_are_acceptable(digits: str) -> None:
    assert check_grouping(digits) == GroupingOutcome.acceptable(0)


@pytest.mark.parametrize("digits", ["12345", "61864918973511", "FFFFFFFF"])
def test_long_ungrouped_digits_are_unreadable(digits: str) -> None:
    assert check_grouping(digits).failure == GroupingFailure.UNREADABLE


@pytest.mark.parametrize(
    ("digits", "group_size"),
    [
        ("1_234_567", 3),
        ("12_345", 3),
        ("123_456", 3),
        ("FFFF_FFFF", 4),
        ("1_0000_0000", 4),
        ("1_2_3", 1),
    ],
)
def test_consistent_grouping_reports_group_size(digits: str, group_size: int) -> None:
    outcome = check_grouping(digits)

    assert outcome.is_acceptable
    assert outcome.group_size == group_size


@pytest.mark.parametrize("digits", ["618_64_9189_73_511", "1234_567", "1_23_456", "123_"])
def test_uneven_grouping_is_inconsistent(digits: str) -> None:
    assert check_grouping(digits).failure == GroupingFailure.INCONSISTENT


@pytest.mark.parametrize("digits", ["6186491_8973511", "12345_67890"])
def test_large_groups_are_flagged(digits: str) -> None:
    assert check_grouping(digits).failure == GroupingFailure.GROUPS_TOO_LARGE


def test_leading_separator_is_accepted() -> None:
    assert check_grouping("_1234") == GroupingOutcome.acceptable(4)
    assert check_grouping("_123_456") == GroupingOutcome.acceptable(3)


def test_check_grouping_rejects_decimal_point() -> None:
    with pytest.raises(ValueError, match="decimal point"):
        check_grouping("12.3")


def test_outcome_carries_exactly_one_of_size_or_failure() -> None:
    with pytest.raises(ValueError):
        GroupingOutcome()
    with pytest.raises(ValueError):
        GroupingOutcome(group_size=3, failure=GroupingFailure.INCONSISTENT)

    assert GroupingOutcome.failed(GroupingFailure.UNREADABLE).is_acceptable is False
    assert GroupingOutcome.acceptable(0).is_acceptable is True
