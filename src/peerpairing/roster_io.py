"""Loading and writing the JSON roster document."""

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
from pathlib import Path
from typing import Any, Dict, Union

from peerpairing.constants import JSON_INDENT
from peerpairing.exceptions import (
    InputMalformedException,
    InputNotFoundException,
    InputUnreadableException,
    OutputWriteException,
)
from peerpairing.models import RosterData
from peerpairing.utils import setup_logger
from peerpairing.utils.validation import validate_roster_document_strict

logger = setup_logger(__name__)


def parse_roster(text: str, source: str = "<input>") -> RosterData:
    """Parse and validate a roster document from JSON text.

    Raises:
        InputMalformedException: If the text is not valid JSON or the
            document structure is invalid
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputMalformedException(f"{source} is not valid JSON: {e}") from e

    try:
        document = validate_roster_document_strict(data)
    except InputMalformedException as e:
        raise InputMalformedException(f"{source}: {e}") from e

    roster = RosterData.from_dict(document)
    logger.debug(
        "Loaded %d members, %d exclusions and %d months from %s",
        len(roster.members),
        len(roster.excluded),
        len(roster.periods),
        source,
    )
    return roster


def load_roster(path: Union[str, Path]) -> RosterData:
    """Read, parse and validate the roster file at ``path``.

    Raises:
        InputNotFoundException: If the file does not exist
        InputUnreadableException: If the file cannot be read or decoded
        InputMalformedException: If the content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise InputNotFoundException(f"Input file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadableException(f"Cannot read input file {path}: {e}") from e
    return parse_roster(text, source=str(path))


def dump_roster(document: Dict[str, Any]) -> str:
    """Serialize a roster document the way it is written to disk."""
    return json.dumps(document, ensure_ascii=False, indent=JSON_INDENT)


def write_roster(document: Dict[str, Any], path: Union[str, Path]) -> None:
    """Write a roster document to ``path``.

    Raises:
        OutputWriteException: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(dump_roster(document) + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputWriteException(f"Cannot write output file {path}: {e}") from e
    logger.info("Wrote updated roster to %s", path)
