"""Command-line interface for generating the next month's pairs.

Reads a roster document, appends one new month and writes the whole
document to stdout (or ``--output``). Errors go to stderr with a non-zero
exit status and nothing is written.
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

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from peerpairing.config import load_configuration
from peerpairing.constants import APP_NAME, EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from peerpairing.exceptions import PeerPairingException
from peerpairing.models import PairingResult
from peerpairing.pairing import PairingEngine
from peerpairing.period_label import parse_period_label, successor_label
from peerpairing.roster_io import dump_roster, load_roster, write_roster
from peerpairing.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def positive_int(value: str) -> int:
    """Argparse type for integers of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1, got {number}")
    return number


def print_summary(result: PairingResult, stream: Optional[TextIO] = None) -> None:
    """Print a human-readable overview of a new month."""
    stream = stream if stream is not None else sys.stderr
    width = max([len(a.mentor) for a in result.assignments] + [len("Mentor")])

    print("=" * 40, file=stream)
    print(f"Pairs for {result.label}", file=stream)
    print("=" * 40, file=stream)
    print(f"  {'Mentor'.ljust(width)}  Mentee", file=stream)
    for assignment in result.assignments:
        print(f"  {assignment.mentor.ljust(width)}  {assignment.mentee}", file=stream)
    if result.skipped:
        print(f"\nSkipped: {', '.join(result.skipped)}", file=stream)
    print(f"Repetition penalty: {result.penalty}", file=stream)
    if result.flipped:
        print(f"Roles reversed: {result.flipped}", file=stream)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate next month's mentor/mentee pairs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Append next month to the history and print the document
  peer-pairing team.json > team.next.json

  # Reproducible run, one member on leave
  peer-pairing team.json --seed 42 --skip Alice

  # First month of a new history
  peer-pairing team.json --month 2024年4月 --output team.json
        """,
    )

    parser.add_argument("input", help="Path to the roster JSON document")

    parser.add_argument(
        "--month",
        help="Label of the new month (default: month after the last one)",
    )

    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="NAME",
        help="Member sitting this month out (repeatable)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")

    parser.add_argument(
        "--attempts",
        type=positive_int,
        help="Random pairings tried per round of the search (default: 1000)",
    )

    parser.add_argument("--config", help="Load configuration from JSON file")

    parser.add_argument(
        "-o",
        "--output",
        help="Write the updated document to this file instead of stdout",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the new pairs in a readable form to stderr",
    )

    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def run(args: argparse.Namespace, stdout: Optional[TextIO] = None) -> int:
    """Generate one month from parsed arguments.

    Raises:
        PeerPairingException: On any input, configuration or label error
    """
    stdout = stdout if stdout is not None else sys.stdout

    config = load_configuration(args.config).merged(
        seed=args.seed, attempts=args.attempts
    )
    roster = load_roster(args.input)

    if args.month:
        parse_period_label(args.month)
        label = args.month
    else:
        label = successor_label(roster.periods)
    if any(period.label == label for period in roster.periods):
        logger.warning("Month %s is already in the history", label)

    engine = PairingEngine(config)
    result = engine.generate(roster, label, pre_skipped=args.skip)
    document = roster.with_period(result.to_period())

    if args.output:
        write_roster(document, args.output)
    else:
        stdout.write(dump_roster(document) + "\n")

    if args.summary:
        print_summary(result)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return run(args)
    except PeerPairingException as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.error("Pairing failed: %s", e, exc_info=True)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
