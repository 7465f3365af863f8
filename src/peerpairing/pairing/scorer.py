"""Repetition penalties for candidate pairs and pairings."""

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

from typing import Iterable, Sequence

from peerpairing.constants import RECENT_PAIRING_PENALTY, REPEAT_PAIRING_PENALTY
from peerpairing.models.assignment import Assignment
from peerpairing.pairing.history_index import HistoryIndex
from peerpairing.type_hints import CandidateScore, Member


class PairScorer:
    """Scores pairs by how recently and how often they met before.

    Lower is better. A pair from the most recent period with assignments
    costs ``recent_penalty`` on top of ``repeat_penalty`` per earlier
    occurrence. Whole candidates are ranked by :meth:`candidate_score`,
    which counts recent repeats first, so a candidate repeating fewer of
    last period's pairs always wins regardless of frequency totals.
    """

    def __init__(
        self,
        index: HistoryIndex,
        recent_penalty: int = RECENT_PAIRING_PENALTY,
        repeat_penalty: int = REPEAT_PAIRING_PENALTY,
    ):
        self.index = index
        self.recent_penalty = recent_penalty
        self.repeat_penalty = repeat_penalty

    def pair_penalty(self, member1: Member, member2: Member) -> int:
        penalty = self.repeat_penalty * self.index.times_paired(member1, member2)
        if self.index.was_recent(member1, member2):
            penalty += self.recent_penalty
        return penalty

    def candidate_penalty(self, assignments: Iterable[Assignment]) -> int:
        """Total penalty of a full candidate pairing."""
        return sum(self.pair_penalty(a.mentor, a.mentee) for a in assignments)

    def recent_repeats(self, assignments: Iterable[Assignment]) -> int:
        """Number of pairs also assigned in the most recent period."""
        return sum(1 for a in assignments if self.index.was_recent(a.mentor, a.mentee))

    def candidate_score(self, assignments: Sequence[Assignment]) -> CandidateScore:
        """Sort key for candidates, compared lexicographically."""
        return self.recent_repeats(assignments), self.candidate_penalty(assignments)
