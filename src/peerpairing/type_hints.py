"""Type hints used in Peer Pairing."""

from typing import FrozenSet, List, Tuple

# A roster member is identified by name only
Member = str
# Unordered pair of two distinct members
Pair = FrozenSet[Member]
# (mentor, mentee) as plain strings
AssignmentIDs = Tuple[Member, Member]
# Members left without a partner
SkipList = List[Member]
# (pairs repeated from the most recent period, total penalty), lower is better
CandidateScore = Tuple[int, int]

#  LocalWords:  AssignmentIDs SkipList CandidateScore
