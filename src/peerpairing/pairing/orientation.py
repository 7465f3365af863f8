"""Role reversal for pairs that met before."""

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

from typing import List, Sequence

from peerpairing.models.assignment import Assignment
from peerpairing.pairing.history_index import HistoryIndex


def orient_assignment(assignment: Assignment, index: HistoryIndex) -> Assignment:
    """Return ``assignment`` with roles reversed if it repeats the last orientation.

    The pair's latest assignment is compared against both orientations of
    ``assignment``: an exact repeat is flipped, the opposite orientation and
    unseen pairs are kept as they are.
    """
    latest = index.latest_orientation(assignment.mentor, assignment.mentee)
    if latest is None or latest == assignment.flipped():
        return assignment
    if latest == assignment:
        return assignment.flipped()
    return assignment


def adjust_orientation(
    assignments: Sequence[Assignment], index: HistoryIndex
) -> List[Assignment]:
    """Apply :func:`orient_assignment` to every assignment of a candidate.

    Applying it twice gives the same result as applying it once.
    """
    return [orient_assignment(assignment, index) for assignment in assignments]
