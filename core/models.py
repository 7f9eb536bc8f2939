"""
Core data models for the package status report.

This module defines the records exchanged between the package loader and the
report assembler: `Package`, the loader's view of one analyzed import path,
and `ListItem`, the immutable display record handed to callers. It also holds
the lenient status helpers the records are rendered and ordered with: values
outside the closed `ListStatus` set render as an empty string instead of
aborting the whole report.
"""

from dataclasses import dataclass

from constants import MALFORMED_STATUS_RANK, STATUS_CHARS, STATUS_RANKS
from models import ListStatus

_STATUS_BY_RANK: dict[int, ListStatus] = {
    rank: status for status, rank in STATUS_RANKS.items()
}


def coerce_status(value: object) -> ListStatus | None:
    """
    Resolve a status-like value to a ListStatus member.

    Args:
        value: A ListStatus, or a raw integer rank as some loaders store it.

    Returns:
        The matching ListStatus, or None when the value is outside the closed set.
    """
    if isinstance(value, ListStatus):
        return value
    # bool is an int subclass but never a rank
    if isinstance(value, int) and not isinstance(value, bool):
        return _STATUS_BY_RANK.get(value)
    return None


def render_status(value: object) -> str:
    """
    Return the canonical single-character form of a status.

    Args:
        value: The status to render.

    Returns:
        str: One character for every ListStatus member, or an empty string for
            anything outside the closed set. Never raises.
    """
    status = coerce_status(value)
    if status is None:
        return ""
    return STATUS_CHARS[status]


def status_rank(value: object) -> int:
    """Rank of a status, or MALFORMED_STATUS_RANK when it is not a status."""
    status = coerce_status(value)
    if status is None:
        return MALFORMED_STATUS_RANK
    return STATUS_RANKS[status]


@dataclass
class Package:
    """
    One analyzed package as produced by a package loader.

    Attributes:
        canonical_path: The import path as known to the module/build system.
        local_path: Where the package physically lives when it has been copied
            or vendored. Empty when there is no distinct local copy.
        status: The status assigned by the analysis.
    """

    canonical_path: str
    local_path: str = ""
    status: ListStatus = ListStatus.UNKNOWN


@dataclass(frozen=True)
class ListItem:
    """
    Represents a package in the current project, ready for display.

    Attributes:
        status: The package status.
        path: The canonical import path.
        vendor_path: The local/vendor path. Suppressed when rendering if it is
            empty or identical to `path`.
    """

    status: ListStatus
    path: str
    vendor_path: str = ""

    def render(self) -> str:
        """
        Render the item as a single report line.

        Returns:
            str: `"<c> <path>"` when the vendor path is redundant, otherwise
                `"<c> <path> [<vendor_path>]"`, where `<c>` is the status
                character (empty for a malformed status).
        """
        status_char = render_status(self.status)
        if not self.vendor_path or self.vendor_path == self.path:
            return f"{status_char} {self.path}"
        return f"{status_char} {self.path} [{self.vendor_path}]"

    def __str__(self) -> str:
        return self.render()
