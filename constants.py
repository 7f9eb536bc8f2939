"""
Application-wide constants and configuration mappings.

This module defines the status tables used throughout the vendorstat CLI:
the rank of every status (which drives report ordering), the canonical
single-character rendering, and the named status groups accepted by the
report filters.
"""

from pathlib import Path
from typing import Final, Mapping
from models import ListStatus


# Sort priority for each status. The report lists higher ranks first, so
# vendored packages come at the top and unknown ones at the bottom.
# Keep this table in sync with ListStatus; it is the only source of ordering.
STATUS_RANKS: Final[Mapping[ListStatus, int]] = {
    ListStatus.UNKNOWN: 0,
    ListStatus.MISSING: 1,
    ListStatus.STD: 2,
    ListStatus.LOCAL: 3,
    ListStatus.EXTERNAL: 4,
    ListStatus.INTERNAL: 5,
    ListStatus.UNUSED: 6,
    ListStatus.PROGRAM: 7,
    ListStatus.VENDOR: 8,
}

# Machine-stable one character form of each status. Downstream tooling parses
# report lines, so these must never change.
STATUS_CHARS: Final[Mapping[ListStatus, str]] = {
    ListStatus.UNKNOWN: "?",
    ListStatus.MISSING: "m",
    ListStatus.STD: "s",
    ListStatus.LOCAL: "l",
    ListStatus.EXTERNAL: "e",
    ListStatus.INTERNAL: "i",
    ListStatus.UNUSED: "u",
    ListStatus.PROGRAM: "p",
    ListStatus.VENDOR: "v",
}

# Rank given to records whose status is not a ListStatus at all.
# It sits below UNKNOWN so malformed records end up at the very bottom.
MALFORMED_STATUS_RANK: Final[int] = -1

# Named groups accepted by status filters in addition to single statuses.
STATUS_GROUPS: Final[Mapping[str, frozenset[ListStatus]]] = {
    "all": frozenset(ListStatus),
    "outside": frozenset({ListStatus.EXTERNAL, ListStatus.MISSING}),
}

# Prefix users may put in front of filter tokens, e.g. "+vendor".
STATUS_FILTER_PREFIX: Final[str] = "+"

CONFIG_DIR: Final[Path] = Path.home() / ".vendorstat"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "settings.json"
