"""Shared helpers for Peer Pairing."""

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

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "peerpairing"


class StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger that writes to stderr.

    Only the package root logger gets a handler; module loggers propagate to
    it, so calling this once per module never duplicates output. Stdout is
    left alone because it carries the roster document.

    Args:
        name: Logger name, usually ``__name__``
        level: Level applied to the package root logger on first setup

    Returns:
        Configured logger
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)
        root.propagate = False
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the level of the package root logger."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
