"""Plain-text table rendering for git-recent.

Turns ranked BranchEntry models into aligned lines:

    * main          2h ago  Fix parser crash on empty input
      feature-x     1d ago  Add feature x

Rendering is pure: the caller supplies ``now`` and writes the lines.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from git_recent.models.branch import BranchEntry

MIN_NAME_WIDTH = 10
AGE_WIDTH = 10

_DAY = timedelta(days=1)
_HOUR = timedelta(hours=1)


def format_duration(elapsed: timedelta) -> str:
    """Render an elapsed time as a 10-character relative age.

    Days and hours are truncated, never rounded. Anything under an hour,
    including negative spans from clock skew, is ``now``.
    """
    if elapsed >= _DAY:
        return f"{elapsed // _DAY:5d}d ago"
    if elapsed >= _HOUR:
        return f"{elapsed // _HOUR:5d}h ago"
    return "now".rjust(AGE_WIDTH)


def name_column_width(entries: Sequence[BranchEntry]) -> int:
    """Width of the name column: the longest name, but at least 10."""
    return max([MIN_NAME_WIDTH, *(len(e.name) for e in entries)])


def format_entry(entry: BranchEntry, now: datetime, width: int) -> str:
    """Render a single table row."""
    marker = "*" if entry.is_head else " "
    age = format_duration(now - entry.commit_time)
    return f"{marker} {entry.name.ljust(width)}  {age.rjust(AGE_WIDTH)}  {entry.summary}"


def render(entries: Sequence[BranchEntry], now: datetime) -> list[str]:
    """Render ranked entries as table lines, one per entry, in input order.

    Args:
        entries: Ranked branch snapshots.
        now: Timezone-aware reference time for relative ages.

    Returns:
        Lines without trailing newlines. Empty when *entries* is empty.
    """
    if not entries:
        return []
    width = name_column_width(entries)
    return [format_entry(entry, now, width) for entry in entries]
