"""Exceptions for use in Peer Pairing"""

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


# ========== Base Application Exception ==========


class PeerPairingException(Exception):
    """Base exception for all Peer Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(PeerPairingException):
    """Base exception for pairing-related errors."""

    pass


class UnknownMemberException(PairingException):
    """Raised when a member name is not part of the roster."""

    pass


# ========== Period Exceptions ==========


class PeriodException(PeerPairingException):
    """Base exception for period label and history errors."""

    pass


class PeriodLabelUnparseableException(PeriodException):
    """Raised when a period label cannot be parsed into year and month."""

    pass


class NoPeriodsPresentException(PeriodException):
    """Raised when the history is empty but a successor label is required."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(PeerPairingException):
    """Base exception for validation errors."""

    pass


class InputMalformedException(ValidationException):
    """Raised when the roster document is not valid JSON or misses required fields."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(PeerPairingException):
    """Base exception for resource-related errors."""

    pass


class InputNotFoundException(ResourceException):
    """Raised when the roster file does not exist."""

    pass


class InputUnreadableException(ResourceException):
    """Raised when the roster file exists but cannot be read."""

    pass


class OutputWriteException(ResourceException):
    """Raised when the updated roster document cannot be written."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(PeerPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
