"""Pairing engine: from roster and history to the next period's assignments."""

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
from typing import Iterable, Optional

from peerpairing.config import PairingConfig
from peerpairing.exceptions import UnknownMemberException
from peerpairing.models import PairingResult, RosterData
from peerpairing.pairing.candidates import CandidateGenerator
from peerpairing.pairing.history_index import HistoryIndex
from peerpairing.pairing.orientation import adjust_orientation
from peerpairing.pairing.scorer import PairScorer
from peerpairing.type_hints import Member
from peerpairing.utils import setup_logger

logger = setup_logger(__name__)


class PairingEngine:
    """Builds the assignments of a new period.

    One engine owns one random source, so two engines built from the same
    seeded configuration produce identical results for identical input.
    """

    def __init__(self, config: Optional[PairingConfig] = None):
        self.config = config if config is not None else PairingConfig()
        self.config.validate()
        self.rng = random.Random(self.config.seed)

    def generate(
        self,
        roster: RosterData,
        label: str,
        pre_skipped: Iterable[Member] = (),
    ) -> PairingResult:
        """Compute the next period for ``roster``.

        Args:
            roster: Members, exclusions and history
            label: Label of the new period
            pre_skipped: Members sitting this period out

        Returns:
            PairingResult with adjusted assignments and the full skip list

        Raises:
            UnknownMemberException: If a pre-skipped name is not in the roster
        """
        pre_skipped = list(dict.fromkeys(pre_skipped))
        unknown = [name for name in pre_skipped if name not in roster.members]
        if unknown:
            raise UnknownMemberException(
                f"Cannot skip members not in the roster: {', '.join(unknown)}"
            )

        index = HistoryIndex.from_periods(roster.periods)
        stale = index.unknown_members(roster.members)
        if stale:
            logger.warning(
                "History mentions members no longer in the roster: %s",
                ", ".join(sorted(stale)),
            )

        eligible = [m for m in roster.members if m not in pre_skipped]
        scorer = PairScorer(
            index,
            recent_penalty=self.config.recent_penalty,
            repeat_penalty=self.config.repeat_penalty,
        )
        generator = CandidateGenerator(
            roster.excluded, scorer, rng=self.rng, attempts=self.config.attempts
        )
        candidate = generator.generate(eligible)

        assignments = adjust_orientation(candidate.assignments, index)
        flipped = sum(
            1 for old, new in zip(candidate.assignments, assignments) if old != new
        )

        if eligible and not assignments:
            logger.warning(
                "No valid pairing possible for %s; all eligible members skipped",
                label,
            )
        logger.info(
            "%s: %d assignments, %d skipped, penalty %d, %d roles reversed",
            label,
            len(assignments),
            len(pre_skipped) + len(candidate.skipped),
            candidate.penalty,
            flipped,
        )

        return PairingResult(
            label=label,
            assignments=assignments,
            skipped=pre_skipped + candidate.skipped,
            penalty=candidate.penalty,
            flipped=flipped,
        )
