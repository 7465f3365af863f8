"""Parsing and formatting of period labels such as "2021年10月"."""

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

import re
from datetime import date
from typing import Sequence

from dateutil.relativedelta import relativedelta

from peerpairing.constants import PERIOD_LABEL_FORMAT, PERIOD_LABEL_PATTERN
from peerpairing.exceptions import (
    NoPeriodsPresentException,
    PeriodLabelUnparseableException,
)
from peerpairing.models.period import Period

_LABEL_RE = re.compile(PERIOD_LABEL_PATTERN)


def parse_period_label(label: str) -> date:
    """Parse a label into the first day of its month.

    Raises:
        PeriodLabelUnparseableException: If the label is not "YYYY年M月"
    """
    match = _LABEL_RE.match(label or "")
    if not match:
        raise PeriodLabelUnparseableException(
            f"Cannot parse period label {label!r}; expected e.g. '2021年10月'"
        )
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise PeriodLabelUnparseableException(
            f"Period label {label!r} is not a valid year and month"
        )
    return date(year, month, 1)


def format_period_label(month_start: date) -> str:
    """Format a date as a period label, without zero padding."""
    return PERIOD_LABEL_FORMAT.format(year=month_start.year, month=month_start.month)


def next_period_label(label: str) -> str:
    """Return the label of the calendar month after ``label``.

    >>> next_period_label("2021年12月")
    '2022年1月'
    """
    month_start = parse_period_label(label)
    try:
        return format_period_label(month_start + relativedelta(months=1))
    except (ValueError, OverflowError) as e:
        raise PeriodLabelUnparseableException(
            f"Period label {label!r} has no successor: {e}"
        ) from e


def successor_label(periods: Sequence[Period]) -> str:
    """Label for the period following the last one in ``periods``.

    Raises:
        NoPeriodsPresentException: If there is no period to follow
        PeriodLabelUnparseableException: If the last label cannot be parsed
    """
    if not periods:
        raise NoPeriodsPresentException(
            "History has no months; pass --month to label the first one"
        )
    return next_period_label(periods[-1].label)
