"""Randomized candidate search for a new period's pairing."""

# Peer Pairing
# Copyright (C) 2025  Peer Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from peerpairing.constants import DEFAULT_ATTEMPTS
from peerpairing.models.assignment import Assignment, make_pair
from peerpairing.pairing.history_index import HistoryIndex
from peerpairing.pairing.scorer import PairScorer
from peerpairing.type_hints import CandidateScore, Member, Pair, SkipList
from peerpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Candidate:
    """Best pairing found for an eligible set.

    Attributes:
        assignments: Mentor/mentee assignments, orientation not yet adjusted
        skipped: Eligible members left out, in the order they were removed
        penalty: Total repetition penalty of ``assignments``
    """

    assignments: List[Assignment] = field(default_factory=list)
    skipped: SkipList = field(default_factory=list)
    penalty: int = 0


class CandidateGenerator:
    """Searches random splits of the eligible members for the cheapest pairing.

    Each attempt shuffles the members and zips the first half (mentors) with
    the second half (mentees). Attempts containing an excluded pair are
    rejected. The rest are ranked by fewest pairs repeated from the most
    recent period, then by lowest penalty, the earliest one winning ties.
    When no attempt is valid the eligible set is shrunk and the search
    repeats, which always ends because an empty set pairs trivially.
    """

    def __init__(
        self,
        excluded: AbstractSet[Pair],
        scorer: PairScorer,
        rng: Optional[random.Random] = None,
        attempts: int = DEFAULT_ATTEMPTS,
    ):
        self.excluded = excluded
        self.scorer = scorer
        self.rng = rng if rng is not None else random.Random()
        self.attempts = attempts

    @property
    def index(self) -> HistoryIndex:
        return self.scorer.index

    def generate(self, eligible: Sequence[Member]) -> Candidate:
        """Pair up ``eligible``, skipping as few members as needed."""
        pool = list(eligible)
        skipped: SkipList = []

        while True:
            if len(pool) % 2:
                leftover = self._pick_odd_one_out(pool)
                pool.remove(leftover)
                skipped.append(leftover)
                logger.debug("Odd number of members, skipping %s", leftover)

            assignments, penalty = self._search(pool)
            if assignments is not None:
                return Candidate(
                    assignments=assignments, skipped=skipped, penalty=penalty
                )

            # An empty pool always pairs, so pool is non-empty here
            dropped = self._pick_most_constrained(pool)
            pool.remove(dropped)
            skipped.append(dropped)
            logger.info(
                "No valid pairing among %d members after %d attempts, skipping %s",
                len(pool) + 1,
                self.attempts,
                dropped,
            )

    def _search(
        self, pool: Sequence[Member]
    ) -> Tuple[Optional[List[Assignment]], int]:
        """Try up to ``attempts`` random splits of an even-sized pool."""
        half = len(pool) // 2
        best: Optional[List[Assignment]] = None
        best_score: CandidateScore = (0, 0)

        for _ in range(max(self.attempts, 1)):
            order = list(pool)
            self.rng.shuffle(order)
            candidate = [
                Assignment(mentor=order[i], mentee=order[i + half])
                for i in range(half)
            ]
            if self.has_excluded(candidate):
                continue
            score = self.scorer.candidate_score(candidate)
            if best is None or score < best_score:
                best, best_score = candidate, score
                if score == (0, 0):
                    break

        return best, best_score[1]

    def has_excluded(self, candidate: Sequence[Assignment]) -> bool:
        return any(assignment.pair in self.excluded for assignment in candidate)

    def _pick_odd_one_out(self, pool: Sequence[Member]) -> Member:
        """Choose who sits out.

        The member skipped least recently goes first; among those, the one
        with the most exclusions inside the pool, so the rest pair easily.
        """
        blocked = self._blocked_counts(pool)
        key = {m: (self.index.skip_recency(m), -blocked[m]) for m in pool}
        best = min(key.values())
        return self.rng.choice([m for m in pool if key[m] == best])

    def _pick_most_constrained(self, pool: Sequence[Member]) -> Member:
        """Choose the member with the most exclusions inside ``pool``."""
        blocked = self._blocked_counts(pool)
        worst = max(blocked.values())
        return self.rng.choice([m for m in pool if blocked[m] == worst])

    def _blocked_counts(self, pool: Sequence[Member]) -> Dict[Member, int]:
        return {
            member: sum(
                1
                for other in pool
                if other != member and make_pair(member, other) in self.excluded
            )
            for member in pool
        }
