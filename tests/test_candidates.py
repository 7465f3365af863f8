import random

import pytest

from peerpairing.models import Assignment, Period, make_pair
from peerpairing.pairing import CandidateGenerator, HistoryIndex, PairScorer


def _generator(excluded=(), periods=(), seed=7, attempts=1000):
    index = HistoryIndex.from_periods(list(periods))
    return CandidateGenerator(
        {make_pair(a, b) for a, b in excluded},
        PairScorer(index),
        rng=random.Random(seed),
        attempts=attempts,
    )


def _members_of(assignments):
    names = []
    for assignment in assignments:
        names.extend(assignment.as_tuple())
    return names


def test_even_roster_pairs_everyone():
    candidate = _generator().generate(["A", "B", "C", "D", "E", "F"])

    assert len(candidate.assignments) == 3
    assert sorted(_members_of(candidate.assignments)) == ["A", "B", "C", "D", "E", "F"]
    assert candidate.skipped == []
    assert candidate.penalty == 0


def test_odd_roster_skips_exactly_one():
    candidate = _generator().generate(["A", "B", "C", "D", "E"])

    assert len(candidate.assignments) == 2
    assert len(candidate.skipped) == 1
    assert set(_members_of(candidate.assignments)) | set(candidate.skipped) == {
        "A",
        "B",
        "C",
        "D",
        "E",
    }


def test_odd_one_out_prefers_member_not_skipped_recently():
    periods = [
        Period("2021年1月", [Assignment("A", "B")], skipped=["C"]),
        Period("2021年2月", [Assignment("A", "C")], skipped=["B"]),
    ]

    for seed in range(20):
        candidate = _generator(periods=periods, seed=seed).generate(["A", "B", "C"])
        assert candidate.skipped == ["A"]


def test_odd_one_out_prefers_blocked_member():
    # Skipping C would leave A and B, who must not meet
    for seed in range(20):
        candidate = _generator(excluded=[("A", "B")], seed=seed).generate(
            ["A", "B", "C"]
        )
        assert candidate.skipped in (["A"], ["B"])
        assert len(candidate.assignments) == 1


def test_exclusions_never_appear():
    excluded = [("A", "B"), ("C", "D"), ("A", "E"), ("B", "F")]
    blocked = {make_pair(a, b) for a, b in excluded}

    for seed in range(50):
        candidate = _generator(excluded=excluded, seed=seed).generate(
            ["A", "B", "C", "D", "E", "F"]
        )
        assert not any(a.pair in blocked for a in candidate.assignments)
        names = _members_of(candidate.assignments)
        assert len(names) == len(set(names))


def test_infeasible_pair_skips_both():
    candidate = _generator(excluded=[("A", "B")]).generate(["A", "B"])

    assert candidate.assignments == []
    assert sorted(candidate.skipped) == ["A", "B"]


def test_shrinks_until_a_valid_pairing_exists():
    # A cannot meet anyone, so A and one more member sit out
    excluded = [("A", "B"), ("A", "C"), ("A", "D")]

    candidate = _generator(excluded=excluded).generate(["A", "B", "C", "D"])

    assert "A" in candidate.skipped
    assert len(candidate.skipped) == 2
    assert len(candidate.assignments) == 1
    assert "A" not in _members_of(candidate.assignments)


def test_empty_pool_gives_empty_candidate():
    candidate = _generator().generate([])

    assert candidate.assignments == []
    assert candidate.skipped == []


def test_avoids_last_month_pairs_when_possible():
    periods = [Period("2021年1月", [Assignment("A", "B"), Assignment("C", "D")])]

    for seed in range(20):
        candidate = _generator(periods=periods, seed=seed).generate(
            ["A", "B", "C", "D"]
        )
        pairs = {a.pair for a in candidate.assignments}
        assert make_pair("A", "B") not in pairs
        assert make_pair("C", "D") not in pairs
        assert candidate.penalty == 0


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_same_seed_same_candidate(seed):
    members = ["A", "B", "C", "D", "E", "F", "G"]

    first = _generator(seed=seed).generate(members)
    second = _generator(seed=seed).generate(members)

    assert first == second


def test_single_attempt_still_terminates():
    candidate = _generator(excluded=[("A", "B")], attempts=1).generate(
        ["A", "B", "C", "D"]
    )

    names = _members_of(candidate.assignments) + candidate.skipped
    assert sorted(names) == ["A", "B", "C", "D"]
    assert make_pair("A", "B") not in {a.pair for a in candidate.assignments}
