"""
Type definitions and data models used across the vendorstat CLI application.

This module contains the package status taxonomy shared by the core, the
adapters and the UI layer. The enum values are names only; ranks and the
single-character forms live in explicit tables in `constants.py`.
"""

from enum import Enum


class ListStatus(Enum):
    """
    Enumeration of the lifecycle states an import path can be in.

    The set is closed: exactly one status applies to a given import path at
    report time. Members are declared from least to most resolved, but sort
    priority comes from `constants.STATUS_RANKS`, never from declaration order.

    Attributes:
        UNKNOWN: The status could not be determined.
        MISSING: The import path was not found anywhere reachable.
        STD: The import resolves to the standard distribution.
        LOCAL: The import is part of the project itself.
        EXTERNAL: Found on the dependency search path but not copied yet.
        INTERNAL: Copied into the project's private tree.
        UNUSED: Copied previously but no longer referenced by any code.
        PROGRAM: An entry-point package living in a private/copied location.
        VENDOR: Resides in the vendor folder.
    """

    UNKNOWN = "unknown"
    MISSING = "missing"
    STD = "std"
    LOCAL = "local"
    EXTERNAL = "external"
    INTERNAL = "internal"
    UNUSED = "unused"
    PROGRAM = "program"
    VENDOR = "vendor"
