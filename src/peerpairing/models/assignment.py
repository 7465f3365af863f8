"""Data model for a single mentor/mentee assignment."""

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

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Union

from peerpairing.constants import KEY_MENTEE, KEY_MENTOR
from peerpairing.type_hints import AssignmentIDs, Member, Pair


def make_pair(member1: Member, member2: Member) -> Pair:
    """Return the unordered pair of two members."""
    return frozenset({member1, member2})


@dataclass(frozen=True)
class Assignment:
    """A directed (mentor, mentee) pairing within one period.

    Attributes:
        mentor: Name of the member acting as mentor
        mentee: Name of the member acting as mentee
    """

    mentor: Member
    mentee: Member

    def __post_init__(self) -> None:
        if self.mentor == self.mentee:
            raise ValueError(f"Member {self.mentor!r} cannot mentor themselves")

    @property
    def pair(self) -> Pair:
        """The unordered pair underlying this assignment."""
        return make_pair(self.mentor, self.mentee)

    def flipped(self) -> "Assignment":
        """Return the same pair with mentor and mentee swapped."""
        return Assignment(mentor=self.mentee, mentee=self.mentor)

    def as_tuple(self) -> AssignmentIDs:
        return (self.mentor, self.mentee)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize assignment to dictionary."""
        return {KEY_MENTOR: self.mentor, KEY_MENTEE: self.mentee}

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], Sequence[str]]) -> "Assignment":
        """Deserialize an assignment.

        Accepts both ``{"mentor": a, "mentee": b}`` and ``[a, b]``.
        """
        if isinstance(data, dict):
            return cls(mentor=str(data[KEY_MENTOR]), mentee=str(data[KEY_MENTEE]))
        mentor, mentee = data
        return cls(mentor=str(mentor), mentee=str(mentee))
