import pytest

from peerpairing.exceptions import InputMalformedException
from peerpairing.utils.validation import (
    validate_excluded,
    validate_members,
    validate_month,
    validate_months,
    validate_roster_document,
    validate_roster_document_strict,
)


def test_members_are_required():
    result = validate_members(None)

    assert not result
    assert "members" in result.error_message


@pytest.mark.parametrize(
    "members, message",
    [
        ("A", "must be a list"),
        (["A", ""], "non-empty string"),
        (["A", 3], "non-empty string"),
        (["A", "B", "A"], "Duplicate member"),
    ],
)
def test_bad_member_lists(members, message):
    result = validate_members(members)

    assert not result
    assert message in result.error_message


def test_member_names_are_case_sensitive():
    assert validate_members(["alice", "Alice"])


def test_excluded_defaults_to_empty():
    result = validate_excluded(None)

    assert result
    assert result.sanitized_value == []


@pytest.mark.parametrize("excluded", ["A,B", [["A"]], [["A", "B", "C"]], [["A", 1]]])
def test_bad_exclusions(excluded):
    assert not validate_excluded(excluded, ["A", "B", "C"])


def test_unknown_or_self_exclusions_are_tolerated():
    assert validate_excluded([["A", "Z"], ["B", "B"]], ["A", "B"])


@pytest.mark.parametrize(
    "month",
    [
        {"month": "2021年10月"},
        {"month": "2021年10月", "assignments": None},
        {"month": "2021年10月", "skip": "A", "assignments": []},
        {"month": "2021年10月", "skip": ["A", "B"], "extraSkip": "C"},
        {"month": "2021年10月", "skip": None, "assignments": [["A", "B"]]},
        {
            "month": "2021年10月",
            "assignments": [{"mentor": "A", "mentee": "B"}],
        },
    ],
)
def test_valid_months(month):
    assert validate_month(month, 0)


@pytest.mark.parametrize(
    "month, message",
    [
        ("2021年10月", "must be an object"),
        ({"assignments": []}, "needs a 'month' label"),
        ({"month": "2021年10月", "skip": 3}, "skip"),
        ({"month": "2021年10月", "assignments": {}}, "must be a list"),
        ({"month": "2021年10月", "assignments": [{"mentor": "A"}]}, "non-empty"),
        ({"month": "2021年10月", "assignments": [["A", "A"]]}, "themselves"),
        ({"month": "2021年10月", "assignments": ["A"]}, "must be an object"),
    ],
)
def test_invalid_months(month, message):
    result = validate_month(month, 4)

    assert not result
    assert message in result.error_message


def test_months_error_names_position():
    result = validate_months([{"month": "2021年10月"}, {"skip": "A"}])

    assert not result
    assert "months[1]" in result.error_message


def test_document_must_be_object():
    assert not validate_roster_document(["A", "B"])


def test_document_with_only_members_is_valid():
    assert validate_roster_document({"members": ["A", "B"]})


def test_strict_validation_raises():
    with pytest.raises(InputMalformedException, match="members"):
        validate_roster_document_strict({"excluded": []})
