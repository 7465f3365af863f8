"""PairingResult data class."""

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
from typing import List

from peerpairing.models.assignment import Assignment
from peerpairing.models.period import Period
from peerpairing.type_hints import SkipList


@dataclass
class PairingResult:
    """Result of a pairing computation for a single period.

    Attributes:
        label: Label of the new period
        assignments: Final assignments, orientation already adjusted
        skipped: Pre-skipped members followed by members left over
        penalty: Total repetition penalty of the chosen candidate
        flipped: Number of assignments whose roles were reversed
    """

    label: str
    assignments: List[Assignment] = field(default_factory=list)
    skipped: SkipList = field(default_factory=list)
    penalty: int = 0
    flipped: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.assignments

    def to_period(self) -> Period:
        """Convert into the period appended to the history."""
        return Period(
            label=self.label,
            assignments=list(self.assignments),
            skipped=list(self.skipped),
        )


#  LocalWords:  PairingResult
