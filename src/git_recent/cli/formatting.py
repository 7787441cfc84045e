"""Rich console helpers for the git-recent CLI.

Table lines are written straight to the console's file, byte for byte.
Errors go through Rich markup; Rich auto-detects TTY and emits no ANSI
codes when piped.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape


def get_console() -> Console:
    """Create a Console for the table on stdout."""
    return Console(stderr=False)


def get_error_console() -> Console:
    """Create a Console for error messages on stderr."""
    return Console(stderr=True)


def print_lines(lines: Iterable[str], console: Console) -> None:
    """Write each line as-is, followed by a newline.

    Bypasses Rich rendering, which would expand tabs and drop control
    characters in commit summaries.
    """
    out = console.file
    for line in lines:
        out.write(line + "\n")
    out.flush()


def format_error(message: str, console: Console) -> None:
    """Display a one-line error message."""
    console.print(f"[red]error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
