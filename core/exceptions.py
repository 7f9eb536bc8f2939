"""
Custom exception classes for the vendorstat CLI.

This module defines application-specific exceptions raised while analyzing a
project, loading analysis manifests, parsing status filters and reading the
settings file. These exceptions provide structured error information and
diagnostic data to help with debugging and error reporting.
"""

import os
from typing import Optional


class AnalysisError(Exception):
    """
    Base exception for dependency analysis failures.

    Package loaders raise this (or a subclass) from `ensure_analyzed()` when
    the project could not be analyzed. The report assembler never wraps or
    alters it; it reaches the caller exactly as the loader raised it.

    Attributes:
        message: A human-readable error message describing what went wrong.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "The project could not be analyzed"
        super().__init__(self.message)
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class ManifestLoadError(AnalysisError):
    """
    Raised when an analysis manifest cannot be read or understood.

    Covers missing or unreadable files, invalid JSON, a document of the wrong
    shape and package entries with an unknown status.

    Attributes:
        file_path: The path of the manifest that failed to load, if known.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Failed to load analysis manifest",
            original_exception=original_exception,
        )
        self.file_path = file_path


class InvalidStatusFilterError(ValueError):
    """
    Raised when a status filter token names no status or status group.

    Attributes:
        token: The offending token, as the user typed it.
        message: A human-readable error message.
    """

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        self.message = message or f"Unknown status filter: {token!r}"
        super().__init__(self.message)


class ConfigError(Exception):
    """
    Raised when the settings file exists but cannot be used.

    Attributes:
        message: A human-readable error message.
        file_path: The settings file path.
        original_exception: The underlying exception, if any.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "Invalid settings file"
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception
