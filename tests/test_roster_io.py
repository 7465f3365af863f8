import json

import pytest

from peerpairing.exceptions import (
    InputMalformedException,
    InputNotFoundException,
    OutputWriteException,
)
from peerpairing.models import Assignment, Period
from peerpairing.roster_io import dump_roster, load_roster, parse_roster, write_roster

DOCUMENT = {
    "team": "platform",
    "members": ["佐藤", "鈴木", "高橋", "田中"],
    "excluded": [["佐藤", "鈴木"]],
    "months": [
        {
            "month": "2021年10月",
            "skip": "田中",
            "assignments": [{"mentor": "佐藤", "mentee": "高橋"}],
        },
        {"month": "2021年11月", "assignments": None, "extraSkip": ["鈴木"]},
    ],
}


def test_parse_roster_builds_models():
    roster = parse_roster(json.dumps(DOCUMENT))

    assert roster.members == ["佐藤", "鈴木", "高橋", "田中"]
    assert roster.is_excluded("鈴木", "佐藤")
    assert roster.periods[0].assignments == [Assignment("佐藤", "高橋")]
    assert roster.periods[0].skipped == ["田中"]
    assert roster.periods[1].assignments == []
    assert roster.periods[1].skipped == ["鈴木"]


def test_optional_sections_default_to_empty():
    roster = parse_roster('{"members": ["A", "B"]}')

    assert roster.excluded == set()
    assert roster.periods == []


@pytest.mark.parametrize("text", ["", "{", "[1, 2]", '{"excluded": []}'])
def test_malformed_input(text):
    with pytest.raises(InputMalformedException):
        parse_roster(text)


def test_load_missing_file(tmp_path):
    with pytest.raises(InputNotFoundException):
        load_roster(tmp_path / "missing.json")


def test_appended_document_keeps_unknown_keys(tmp_path):
    path = tmp_path / "team.json"
    path.write_text(json.dumps(DOCUMENT, ensure_ascii=False), encoding="utf-8")
    roster = load_roster(path)

    document = roster.with_period(
        Period("2021年12月", [Assignment("高橋", "田中")], skipped=[])
    )

    assert document["team"] == "platform"
    assert document["months"][:2] == DOCUMENT["months"]
    assert document["months"][2] == {
        "month": "2021年12月",
        "assignments": [{"mentor": "高橋", "mentee": "田中"}],
    }


def test_document_without_months_gets_history():
    roster = parse_roster('{"members": ["A", "B"]}')

    document = roster.with_period(Period("2021年1月", [Assignment("A", "B")]))

    assert document["months"] == [
        {"month": "2021年1月", "assignments": [{"mentor": "A", "mentee": "B"}]}
    ]


def test_dump_keeps_non_ascii_names():
    text = dump_roster({"members": ["佐藤"]})

    assert "佐藤" in text
    assert json.loads(text) == {"members": ["佐藤"]}


def test_write_roster_round_trip(tmp_path):
    path = tmp_path / "out.json"

    write_roster(DOCUMENT, path)

    assert json.loads(path.read_text(encoding="utf-8")) == DOCUMENT


def test_write_roster_to_missing_directory(tmp_path):
    with pytest.raises(OutputWriteException):
        write_roster(DOCUMENT, tmp_path / "nope" / "out.json")
