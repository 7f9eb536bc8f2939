"""Report ordering and status filters.

This module holds the pure functions behind the status report:

- The total order used to list packages: status rank descending, then the
  canonical path ascending. Python compares strings by code point, which is
  the same order as comparing their UTF-8 bytes.
- Parsing of `+status` filter tokens and filtering of an ordered list.
"""

from typing import Iterable

from constants import STATUS_CHARS, STATUS_FILTER_PREFIX, STATUS_GROUPS
from core.exceptions import InvalidStatusFilterError
from core.models import ListItem, coerce_status, status_rank
from models import ListStatus

def list_item_sort_key(item: ListItem) -> tuple[int, str]:
    """Sort key placing higher ranks first and then ordering by path."""
    return (-status_rank(item.status), item.path)


def sort_list_items(items: Iterable[ListItem]) -> list[ListItem]:
    """
    Order display records for the report.

    The primary key is the status rank, descending (vendor, program, unused,
    internal, external, local, std, missing, unknown). Records with equal
    ranks are ordered by canonical path, ascending. `sorted` is stable, so
    records with identical keys keep their input order and repeated calls on
    the same input give identical output.

    Args:
        items: The records to order. The input is not modified.

    Returns:
        list[ListItem]: A new, ordered list.
    """
    return sorted(items, key=list_item_sort_key)


def parse_status_filter(tokens: Iterable[str]) -> frozenset[ListStatus]:
    """
    Translate user supplied filter tokens into a set of statuses.

    Each token is matched case-insensitively, with an optional leading "+",
    against status names ("vendor"), status characters ("v") and the groups
    in STATUS_GROUPS ("outside", "all").

    Args:
        tokens: Filter tokens, e.g. ["+vendor", "+outside"].

    Returns:
        frozenset[ListStatus]: The union of all selected statuses. Every status
            is selected when no tokens are given.

    Raises:
        InvalidStatusFilterError: If a token matches nothing.
    """
    selected: set[ListStatus] = set()
    seen_token = False
    for token in tokens:
        seen_token = True
        name = token.strip().lower()
        if name.startswith(STATUS_FILTER_PREFIX):
            name = name[len(STATUS_FILTER_PREFIX) :]

        if name in STATUS_GROUPS:
            selected.update(STATUS_GROUPS[name])
            continue

        match = next(
            (
                status
                for status in ListStatus
                if name in (status.value, STATUS_CHARS[status])
            ),
            None,
        )
        if match is None:
            raise InvalidStatusFilterError(token)
        selected.add(match)

    if not seen_token:
        return frozenset(ListStatus)
    return frozenset(selected)


def filter_list_items(
    items: Iterable[ListItem], statuses: frozenset[ListStatus]
) -> list[ListItem]:
    """Keep the items whose status is in `statuses`, preserving their order."""
    return [item for item in items if coerce_status(item.status) in statuses]
