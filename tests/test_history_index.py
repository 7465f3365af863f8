from peerpairing.models import Assignment, Period, make_pair
from peerpairing.pairing import HistoryIndex, PairScorer


def _period(label, *pairs, skipped=()):
    return Period(
        label=label,
        assignments=[Assignment(mentor, mentee) for mentor, mentee in pairs],
        skipped=list(skipped),
    )


def test_empty_history_has_no_lookups():
    index = HistoryIndex.from_periods([])

    assert index.recent_pairs == frozenset()
    assert index.latest_orientation("A", "B") is None
    assert index.times_paired("A", "B") == 0
    assert index.skip_recency("A") == -1


def test_pair_counts_ignore_orientation():
    index = HistoryIndex.from_periods(
        [
            _period("2021年1月", ("A", "B")),
            _period("2021年2月", ("B", "A")),
            _period("2021年3月", ("A", "B"), ("C", "D")),
        ]
    )

    assert index.times_paired("A", "B") == 3
    assert index.times_paired("B", "A") == 3
    assert index.times_paired("C", "D") == 1
    assert index.times_paired("A", "C") == 0


def test_latest_orientation_comes_from_last_meeting():
    index = HistoryIndex.from_periods(
        [
            _period("2021年1月", ("A", "B")),
            _period("2021年2月", ("B", "A")),
            _period("2021年3月", ("C", "D")),
        ]
    )

    assert index.latest_orientation("A", "B") == Assignment("B", "A")
    assert index.latest_orientation("B", "A") == Assignment("B", "A")
    assert index.latest_orientation("D", "C") == Assignment("C", "D")


def test_recent_pairs_skip_months_without_assignments():
    index = HistoryIndex.from_periods(
        [
            _period("2021年1月", ("A", "B")),
            _period("2021年2月", ("A", "C")),
            _period("2021年3月", skipped=["A", "B", "C"]),
        ]
    )

    assert index.recent_pairs == frozenset({make_pair("A", "C")})
    assert index.was_recent("C", "A")
    assert not index.was_recent("A", "B")


def test_skip_recency_tracks_last_skip():
    index = HistoryIndex.from_periods(
        [
            _period("2021年1月", ("A", "B"), skipped=["C"]),
            _period("2021年2月", ("A", "C"), skipped=["B"]),
            _period("2021年3月", ("B", "C"), skipped=["A"]),
            _period("2021年4月", ("A", "B"), skipped=["C"]),
        ]
    )

    assert index.skip_recency("B") == 1
    assert index.skip_recency("A") == 2
    assert index.skip_recency("C") == 3
    assert index.skip_recency("Z") == -1


def test_unknown_members_lists_departed_people():
    index = HistoryIndex.from_periods([_period("2021年1月", ("A", "Old"))])

    assert index.unknown_members(["A", "B"]) == frozenset({"Old"})


def test_recent_pairing_outweighs_frequency():
    periods = [_period(f"2020年{m}月", ("A", "B")) for m in range(1, 11)]
    periods.append(_period("2020年11月", ("A", "C")))
    scorer = PairScorer(HistoryIndex.from_periods(periods))

    # Ten earlier meetings still cost less than last month's pair
    assert scorer.pair_penalty("A", "B") == 10
    assert scorer.pair_penalty("A", "C") == 100 + 1
    assert scorer.pair_penalty("B", "C") == 0
    assert scorer.candidate_penalty(
        [Assignment("A", "B"), Assignment("C", "D")]
    ) == 10


def test_scorer_weights_are_configurable():
    index = HistoryIndex.from_periods([_period("2021年1月", ("A", "B"))])
    scorer = PairScorer(index, recent_penalty=1000, repeat_penalty=5)

    assert scorer.pair_penalty("B", "A") == 1005


def test_candidate_score_ranks_recent_repeats_first():
    periods = [_period(f"2019年{m}月", ("A", "C"), ("B", "D")) for m in range(1, 13)]
    periods.append(_period("2020年1月", ("A", "B")))
    scorer = PairScorer(HistoryIndex.from_periods(periods), recent_penalty=2)

    fresh = [Assignment("A", "C"), Assignment("B", "D")]
    repeat = [Assignment("A", "B"), Assignment("C", "D")]

    assert scorer.candidate_penalty(fresh) > scorer.candidate_penalty(repeat)
    assert scorer.recent_repeats(fresh) == 0
    assert scorer.recent_repeats(repeat) == 1
    assert scorer.candidate_score(fresh) == (0, 24)
    assert scorer.candidate_score(repeat) == (1, 3)
    assert scorer.candidate_score(fresh) < scorer.candidate_score(repeat)
