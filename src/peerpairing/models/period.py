"""Data model for one pairing period (a month)."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Union

from peerpairing.constants import (
    KEY_ASSIGNMENTS,
    KEY_EXTRA_SKIP,
    KEY_MONTH,
    KEY_SKIP,
)
from peerpairing.models.assignment import Assignment
from peerpairing.type_hints import Pair, SkipList


def normalize_skip(value: Union[None, str, List[str]]) -> SkipList:
    """Turn a skip entry (missing, a single name or a list) into a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return [str(name) for name in value]


@dataclass
class Period:
    """Contains all data for a single period.

    Attributes:
        label: Period label, e.g. "2021年10月"
        assignments: Directed mentor/mentee assignments of the period
        skipped: Members left without a partner in this period
    """

    label: str
    assignments: List[Assignment] = field(default_factory=list)
    skipped: SkipList = field(default_factory=list)

    @property
    def pairs(self) -> Set[Pair]:
        return {assignment.pair for assignment in self.assignments}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize period to dictionary.

        The skip list is always written as a list and omitted when empty.
        """
        data: Dict[str, Any] = {
            KEY_MONTH: self.label,
            KEY_ASSIGNMENTS: [a.to_dict() for a in self.assignments],
        }
        if self.skipped:
            data[KEY_SKIP] = list(self.skipped)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Period":
        """Deserialize period from dictionary."""
        skipped = normalize_skip(data.get(KEY_SKIP))
        for name in normalize_skip(data.get(KEY_EXTRA_SKIP)):
            if name not in skipped:
                skipped.append(name)
        return cls(
            label=str(data[KEY_MONTH]),
            assignments=[
                Assignment.from_dict(a) for a in (data.get(KEY_ASSIGNMENTS) or [])
            ],
            skipped=skipped,
        )
