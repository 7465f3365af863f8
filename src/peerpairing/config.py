"""Configuration settings for the pairing engine."""

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

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from peerpairing.constants import (
    DEFAULT_ATTEMPTS,
    RECENT_PAIRING_PENALTY,
    REPEAT_PAIRING_PENALTY,
)
from peerpairing.exceptions import InvalidConfigurationException
from peerpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PairingConfig:
    """Configuration for the pairing engine.

    Attributes:
        attempts: Random splits tried per eligible-set size
        recent_penalty: Cost of repeating a pair from the most recent period
        repeat_penalty: Cost per earlier occurrence of a pair
        seed: Seed for the random source, None for an unseeded run
    """

    attempts: int = DEFAULT_ATTEMPTS
    recent_penalty: int = RECENT_PAIRING_PENALTY
    repeat_penalty: int = REPEAT_PAIRING_PENALTY
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise InvalidConfigurationException for unusable values."""
        for name in ("attempts", "recent_penalty", "repeat_penalty"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationException(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.attempts < 1:
            raise InvalidConfigurationException(
                f"attempts must be at least 1, got {self.attempts}"
            )
        if self.recent_penalty < 1:
            raise InvalidConfigurationException(
                f"recent_penalty must be positive, got {self.recent_penalty}"
            )
        if self.repeat_penalty < 0:
            raise InvalidConfigurationException(
                f"repeat_penalty must not be negative, got {self.repeat_penalty}"
            )
        if self.recent_penalty <= self.repeat_penalty:
            raise InvalidConfigurationException(
                f"recent_penalty ({self.recent_penalty}) must exceed "
                f"repeat_penalty ({self.repeat_penalty})"
            )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise InvalidConfigurationException(
                f"seed must be an integer, got {self.seed!r}"
            )

    def merged(self, **overrides: Any) -> "PairingConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "attempts": self.attempts,
            "recent_penalty": self.recent_penalty,
            "repeat_penalty": self.repeat_penalty,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingConfig":
        """Deserialize configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", unknown)
        config = cls(**{k: v for k, v in data.items() if k in known})
        config.validate()
        return config


def load_configuration(config_file: Optional[Union[str, Path]]) -> PairingConfig:
    """Load configuration from JSON file.

    Args:
        config_file: Path to configuration file, or None for defaults

    Returns:
        Validated configuration

    Raises:
        InvalidConfigurationException: If the file is missing or invalid
    """
    if not config_file:
        return PairingConfig()

    path = Path(config_file)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise InvalidConfigurationException(
            f"Cannot read configuration file {path}: {e}"
        ) from e
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(
            f"Configuration file {path} is not valid JSON: {e}"
        ) from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Configuration file {path} must contain a JSON object"
        )

    logger.debug("Loaded configuration from %s", path)
    return PairingConfig.from_dict(data)
