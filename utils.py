"""
General utility functions for the CLI application.
"""

from rich.console import Console
from rich.markup import escape

console: Console = Console()

_debug_enabled: bool = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off for the rest of the process."""
    global _debug_enabled
    _debug_enabled = enabled


def debug(
    *values: object,
    sep: str = " ",
    end: str = "\n",
) -> None:
    """
    Print debug message with orange formatting.

    Nothing is printed unless debug output was enabled with `set_debug(True)`.

    Args:
        *values: Variable number of objects to print. All values are converted to strings.
        sep: Separator string between values. Defaults to a single space.
        end: String appended after the last value. Defaults to newline.
    """
    if not _debug_enabled:
        return

    # Convert all values to strings
    str_values = [str(v) for v in values]

    # Join with separator
    message = sep.join(str_values)

    console.print(f"DEBUG: {escape(message)}", end=end, style="orange1", highlight=False)
