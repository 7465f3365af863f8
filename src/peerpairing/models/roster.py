"""Data model for the roster document (members, exclusions and history)."""

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

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from peerpairing.constants import KEY_EXCLUDED, KEY_MEMBERS, KEY_MONTHS
from peerpairing.models.assignment import make_pair
from peerpairing.models.period import Period
from peerpairing.type_hints import Member, Pair


@dataclass
class RosterData:
    """Everything the pairing engine needs from the roster document.

    Attributes:
        members: Ordered, unique member names
        excluded: Unordered pairs that must never be assigned
        periods: Past periods in chronological order
        document: The raw document as loaded; kept so unknown keys survive
            the round trip untouched
    """

    members: List[Member]
    excluded: Set[Pair] = field(default_factory=set)
    periods: List[Period] = field(default_factory=list)
    document: Dict[str, Any] = field(default_factory=dict, repr=False)

    def is_excluded(self, member1: Member, member2: Member) -> bool:
        """Check if two members must never be paired, in either orientation."""
        return make_pair(member1, member2) in self.excluded

    def with_period(self, period: Period) -> Dict[str, Any]:
        """Return a copy of the document with ``period`` appended to the history.

        The loaded document itself is not modified.
        """
        document = copy.deepcopy(self.document) if self.document else self.to_dict()
        months = document.get(KEY_MONTHS)
        if not isinstance(months, list):
            months = []
            document[KEY_MONTHS] = months
        months.append(period.to_dict())
        return document

    def to_dict(self) -> Dict[str, Any]:
        """Serialize roster data to dictionary."""
        return {
            KEY_MEMBERS: list(self.members),
            KEY_EXCLUDED: [sorted(pair) for pair in self.excluded],
            KEY_MONTHS: [period.to_dict() for period in self.periods],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RosterData":
        """Deserialize roster data from dictionary.

        ``excluded`` and ``months`` default to empty when absent; the
        structure is expected to have passed validation already.
        """
        excluded = set()
        for rule in data.get(KEY_EXCLUDED) or []:
            first, second = rule
            if first != second:
                excluded.add(make_pair(str(first), str(second)))
        return cls(
            members=[str(name) for name in data[KEY_MEMBERS]],
            excluded=excluded,
            periods=[Period.from_dict(m) for m in (data.get(KEY_MONTHS) or [])],
            document=data,
        )
