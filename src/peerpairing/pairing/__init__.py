"""Pairing algorithm for Peer Pairing.

The engine indexes the history, searches random splits of the eligible
members for the cheapest valid pairing and then reverses roles for pairs
that would repeat their last orientation.
"""

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

from peerpairing.pairing.candidates import Candidate, CandidateGenerator
from peerpairing.pairing.engine import PairingEngine
from peerpairing.pairing.history_index import HistoryIndex
from peerpairing.pairing.orientation import adjust_orientation, orient_assignment
from peerpairing.pairing.scorer import PairScorer

__all__ = [
    "Candidate",
    "CandidateGenerator",
    "HistoryIndex",
    "PairScorer",
    "PairingEngine",
    "adjust_orientation",
    "orient_assignment",
]
