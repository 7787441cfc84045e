"""Branch ranking for git-recent.

Selects the most recently committed-to branches, newest first.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from operator import attrgetter

from git_recent.models.branch import BranchEntry

_by_commit_time = attrgetter("commit_time")


def select_recent(entries: Sequence[BranchEntry], count: int) -> list[BranchEntry]:
    """Return the *count* entries with the newest tip commits, newest first.

    A *count* of 0 means no cap. Entries with equal commit times keep their
    relative input order; no secondary key is applied.

    Args:
        entries: Branch snapshots in provider order. Not modified.
        count: Maximum number of entries to return, 0 for all.

    Returns:
        A new list, non-increasing in commit_time.
    """
    total = len(entries)
    limit = total if count <= 0 else min(count, total)
    if limit == 0:
        return []
    if limit < total:
        # Top-k selection; nlargest is stable like sorted(..., reverse=True).
        return heapq.nlargest(limit, entries, key=_by_commit_time)
    return sorted(entries, key=_by_commit_time, reverse=True)
