"""Validation utilities for Peer Pairing.

This module checks the structure of a roster document before it is turned
into models, with consistent error reporting.
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

from typing import Any, List, Optional, Sequence

from peerpairing.constants import (
    KEY_ASSIGNMENTS,
    KEY_EXCLUDED,
    KEY_EXTRA_SKIP,
    KEY_MEMBERS,
    KEY_MENTEE,
    KEY_MENTOR,
    KEY_MONTH,
    KEY_MONTHS,
    KEY_SKIP,
)
from peerpairing.exceptions import InputMalformedException
from peerpairing.utils import setup_logger

logger = setup_logger(__name__)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, error_message=message)


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


# ========== Member Validation ==========


def validate_members(members: Any) -> ValidationResult:
    """Validate the roster's member list.

    Args:
        members: Value of the ``members`` key

    Returns:
        ValidationResult whose sanitized value is the member list
    """
    if members is None:
        return _invalid(f"Input must contain a '{KEY_MEMBERS}' list")
    if not isinstance(members, list):
        return _invalid(f"'{KEY_MEMBERS}' must be a list of names")

    seen = set()
    for position, name in enumerate(members):
        if not _is_name(name):
            return _invalid(
                f"'{KEY_MEMBERS}[{position}]' must be a non-empty string, got {name!r}"
            )
        if name in seen:
            return _invalid(f"Duplicate member name: {name!r}")
        seen.add(name)

    return ValidationResult(is_valid=True, sanitized_value=list(members))


# ========== Exclusion Validation ==========


def validate_excluded(
    excluded: Any, members: Sequence[str] = ()
) -> ValidationResult:
    """Validate the exclusion rules.

    Rules naming unknown members or the same member twice are accepted with a
    warning; they can never match a generated assignment.

    Args:
        excluded: Value of the ``excluded`` key, None when absent
        members: Roster, used for the unknown-member warning
    """
    if excluded is None:
        return ValidationResult(is_valid=True, sanitized_value=[])
    if not isinstance(excluded, list):
        return _invalid(f"'{KEY_EXCLUDED}' must be a list of name pairs")

    known = set(members)
    for position, rule in enumerate(excluded):
        if (
            not isinstance(rule, list)
            or len(rule) != 2
            or not all(_is_name(name) for name in rule)
        ):
            return _invalid(
                f"'{KEY_EXCLUDED}[{position}]' must be a pair of names, got {rule!r}"
            )
        if rule[0] == rule[1]:
            logger.warning("Ignoring exclusion of %s with themselves", rule[0])
            continue
        if known:
            unknown = [name for name in rule if name not in known]
            if unknown:
                logger.warning(
                    "Exclusion %s names members not in the roster: %s",
                    rule,
                    ", ".join(unknown),
                )

    return ValidationResult(is_valid=True, sanitized_value=excluded)


# ========== Month Validation ==========


def _validate_skip(value: Any, where: str) -> Optional[str]:
    if value is None or _is_name(value) or value == "":
        return None
    if isinstance(value, list) and all(_is_name(name) for name in value):
        return None
    return f"'{where}' must be a name or a list of names, got {value!r}"


def _validate_assignment(value: Any, where: str) -> Optional[str]:
    if isinstance(value, dict):
        mentor, mentee = value.get(KEY_MENTOR), value.get(KEY_MENTEE)
    elif isinstance(value, list) and len(value) == 2:
        mentor, mentee = value
    else:
        return (
            f"'{where}' must be an object with '{KEY_MENTOR}' and "
            f"'{KEY_MENTEE}', got {value!r}"
        )
    if not _is_name(mentor) or not _is_name(mentee):
        return f"'{where}' needs non-empty mentor and mentee names"
    if mentor == mentee:
        return f"'{where}' pairs {mentor!r} with themselves"
    return None


def validate_month(month: Any, position: int) -> ValidationResult:
    """Validate one entry of the ``months`` history."""
    where = f"{KEY_MONTHS}[{position}]"
    if not isinstance(month, dict):
        return _invalid(f"'{where}' must be an object")
    if not _is_name(month.get(KEY_MONTH)):
        return _invalid(f"'{where}' needs a '{KEY_MONTH}' label")

    for key in (KEY_SKIP, KEY_EXTRA_SKIP):
        error = _validate_skip(month.get(key), f"{where}.{key}")
        if error:
            return _invalid(error)

    assignments = month.get(KEY_ASSIGNMENTS)
    if assignments is None:
        return ValidationResult(is_valid=True, sanitized_value=month)
    if not isinstance(assignments, list):
        return _invalid(f"'{where}.{KEY_ASSIGNMENTS}' must be a list")

    paired = set()
    for index, assignment in enumerate(assignments):
        error = _validate_assignment(assignment, f"{where}.{KEY_ASSIGNMENTS}[{index}]")
        if error:
            return _invalid(error)
        names = (
            (assignment[KEY_MENTOR], assignment[KEY_MENTEE])
            if isinstance(assignment, dict)
            else tuple(assignment)
        )
        doubled = paired.intersection(names)
        if doubled:
            logger.warning(
                "Month %s assigns %s more than once",
                month[KEY_MONTH],
                ", ".join(sorted(doubled)),
            )
        paired.update(names)

    return ValidationResult(is_valid=True, sanitized_value=month)


def validate_months(months: Any) -> ValidationResult:
    """Validate the ``months`` history; None means an empty history."""
    if months is None:
        return ValidationResult(is_valid=True, sanitized_value=[])
    if not isinstance(months, list):
        return _invalid(f"'{KEY_MONTHS}' must be a list")
    for position, month in enumerate(months):
        result = validate_month(month, position)
        if not result:
            return result
    return ValidationResult(is_valid=True, sanitized_value=months)


# ========== Document Validation ==========


def validate_roster_document(data: Any) -> ValidationResult:
    """Validate a whole roster document.

    Args:
        data: Parsed JSON value

    Returns:
        ValidationResult whose sanitized value is the document itself
    """
    if not isinstance(data, dict):
        return _invalid("Input must be a JSON object")

    checks: List[ValidationResult] = [validate_members(data.get(KEY_MEMBERS))]
    if checks[0]:
        checks.append(validate_excluded(data.get(KEY_EXCLUDED), data[KEY_MEMBERS]))
        checks.append(validate_months(data.get(KEY_MONTHS)))

    for result in checks:
        if not result:
            return result
    return ValidationResult(is_valid=True, sanitized_value=data)


def validate_roster_document_strict(data: Any) -> dict:
    """Validate a roster document and raise exception if invalid.

    Raises:
        InputMalformedException: If the document is invalid
    """
    result = validate_roster_document(data)
    if not result.is_valid:
        raise InputMalformedException(result.error_message)
    return result.sanitized_value
