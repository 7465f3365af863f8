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

# --- Constants ---
APP_NAME = "peer-pairing"
JSON_INDENT = 2

# Roster document keys
KEY_MEMBERS = "members"
KEY_EXCLUDED = "excluded"
KEY_MONTHS = "months"
KEY_MONTH = "month"
KEY_SKIP = "skip"
KEY_EXTRA_SKIP = "extraSkip"  # Legacy key for leftover members
KEY_ASSIGNMENTS = "assignments"
KEY_MENTOR = "mentor"
KEY_MENTEE = "mentee"

# Period labels, e.g. "2021年10月"
PERIOD_LABEL_PATTERN = r"^\s*(\d{1,4})\s*年\s*(\d{1,2})\s*月\s*$"
PERIOD_LABEL_FORMAT = "{year}年{month}月"

# Candidate search
DEFAULT_ATTEMPTS = 1000

# Penalties (lower total is better)
RECENT_PAIRING_PENALTY = 100  # Pair met in the most recent period with assignments
REPEAT_PAIRING_PENALTY = 1  # Per earlier occurrence of the pair

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
