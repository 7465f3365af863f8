"""Read-only lookup structures derived from the pairing history."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Sequence

from peerpairing.models.assignment import Assignment, make_pair
from peerpairing.models.period import Period
from peerpairing.type_hints import Member, Pair


@dataclass
class HistoryIndex:
    """
    Lookup tables over past periods.

    Attributes
    ----------
    pair_counts : Counter of frozenset of str
        How often each unordered pair has been assigned, in any orientation.
    latest : dict of frozenset of str to Assignment
        The assignment of each pair in the last period where the pair met.
    recent_pairs : frozenset of frozenset of str
        Pairs of the last period that has at least one assignment.
    last_skipped : dict of str to int
        Index of the last period in which a member was skipped.
    """

    pair_counts: Counter = field(default_factory=Counter)
    latest: Dict[Pair, Assignment] = field(default_factory=dict)
    recent_pairs: FrozenSet[Pair] = frozenset()
    last_skipped: Dict[Member, int] = field(default_factory=dict)

    @classmethod
    def from_periods(cls, periods: Sequence[Period]) -> "HistoryIndex":
        """Build the index from periods given in chronological order."""
        index = cls()
        for position, period in enumerate(periods):
            for assignment in period.assignments:
                index.pair_counts[assignment.pair] += 1
                # Later periods overwrite earlier ones
                index.latest[assignment.pair] = assignment
            if period.assignments:
                index.recent_pairs = frozenset(period.pairs)
            for member in period.skipped:
                index.last_skipped[member] = position
        return index

    def times_paired(self, member1: Member, member2: Member) -> int:
        return self.pair_counts[make_pair(member1, member2)]

    def was_recent(self, member1: Member, member2: Member) -> bool:
        """Check if two members were paired in the most recent period."""
        return make_pair(member1, member2) in self.recent_pairs

    def latest_orientation(
        self, member1: Member, member2: Member
    ) -> Optional[Assignment]:
        """Return the most recent assignment of this pair, or None."""
        return self.latest.get(make_pair(member1, member2))

    def skip_recency(self, member: Member) -> int:
        """Index of the last period ``member`` was skipped, -1 if never."""
        return self.last_skipped.get(member, -1)

    def unknown_members(self, roster: Iterable[Member]) -> FrozenSet[Member]:
        """Members appearing in the history but not in ``roster``."""
        seen = set()
        for pair in self.pair_counts:
            seen.update(pair)
        return frozenset(seen - set(roster))
