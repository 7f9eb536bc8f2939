"""
Status report rendering using Rich.

This module prints the ordered package list produced by the report assembler.
Every line is exactly `ListItem.render()`; colour is applied around the text
so the plain form stays parseable when colour is disabled or output is piped.
A footer summarizes how many packages fall into each status.
"""

from collections import Counter
from enum import StrEnum
from typing import Iterable

from rich.console import Console
from rich.text import Text

from constants import STATUS_RANKS
from core.models import ListItem, coerce_status
from models import ListStatus


class StatusStyle(StrEnum):
    """
    Colour used for each status in the report.

    Attributes mirror ListStatus member names; the value is a Rich style.
    """

    UNKNOWN = "red"
    MISSING = "bold red"
    STD = "dim"
    LOCAL = "cyan"
    EXTERNAL = "yellow"
    INTERNAL = "blue"
    UNUSED = "magenta"
    PROGRAM = "bright_green"
    VENDOR = "green"


def style_for(status: object) -> str:
    """Rich style for a status; plain text for malformed statuses."""
    resolved = coerce_status(status)
    if resolved is None:
        return ""
    return StatusStyle[resolved.name].value


def summarize(items: Iterable[ListItem]) -> list[tuple[ListStatus, int]]:
    """
    Count items per status.

    Returns:
        list[tuple[ListStatus, int]]: Non-zero counts, highest rank first.
            Items with a malformed status are not counted.
    """
    counts: Counter[ListStatus] = Counter()
    for item in items:
        status = coerce_status(item.status)
        if status is not None:
            counts[status] += 1
    return [
        (status, counts[status])
        for status in sorted(STATUS_RANKS, key=STATUS_RANKS.__getitem__, reverse=True)
        if counts[status]
    ]


def render_report(
    items: list[ListItem],
    console: Console,
    color: bool = True,
    show_summary: bool = True,
) -> int:
    """
    Print the status report.

    Args:
        items: Ordered records, as returned by `Context.list_status()`.
        console: Console to print to.
        color: Whether to style lines by status.
        show_summary: Whether to print the per-status count footer.

    Returns:
        int: The number of records with a malformed status. Those are printed
            like any other record (with an empty status character) and flagged
            with a warning line.
    """
    malformed = 0
    for item in items:
        line = Text(item.render(), style=style_for(item.status) if color else "")
        console.print(line, highlight=False, soft_wrap=True)
        if coerce_status(item.status) is None:
            malformed += 1

    if malformed:
        console.print(
            f"[yellow]Warning:[/yellow] {malformed} package(s) have an unrecognized status"
        )

    if show_summary and items:
        summary = ", ".join(
            f"{status.value} {count}" for status, count in summarize(items)
        )
        noun = "package" if len(items) == 1 else "packages"
        console.print(f"\n[bold]{len(items)} {noun}[/bold] ({summary})")

    return malformed
