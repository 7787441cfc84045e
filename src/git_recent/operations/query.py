"""The recent-branches query: provider, then ranking, then rendering."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from git_recent.formatting import render
from git_recent.models.branch import BranchEntry
from git_recent.models.config import QueryOptions
from git_recent.operations.ranking import select_recent
from git_recent.protocols import BranchProvider
from git_recent.storage.repository import GitBranchProvider

logger = logging.getLogger(__name__)


def collect_recent(provider: BranchProvider, options: QueryOptions) -> list[BranchEntry]:
    """List branches of the configured scope and keep the most recent ones.

    Raises:
        RecentError: The provider failed; no partial result is returned.
    """
    entries = provider.list_branches(options.scope).unwrap()
    recent = select_recent(entries, options.count)
    logger.debug("Selected %d of %d branches", len(recent), len(entries))
    return recent


def recent_branches(
    options: Optional[QueryOptions] = None,
    path: str | os.PathLike[str] = ".",
    *,
    now: Optional[datetime] = None,
    ceiling_dirs: Optional[Iterable[str | os.PathLike[str]]] = None,
) -> list[str]:
    """Run the whole query against the repository at *path*.

    The repository handle is released before this returns or raises.

    Args:
        options: Count and scope. Defaults to QueryOptions().
        path: Where to start repository discovery.
        now: Reference time for relative ages; defaults to the current time.
        ceiling_dirs: Directories discovery must not walk above.

    Returns:
        Rendered table lines, empty if the scope has no branches.
    """
    if options is None:
        options = QueryOptions()
    with GitBranchProvider.open(path, ceiling_dirs=ceiling_dirs) as provider:
        recent = collect_recent(provider, options)
    if now is None:
        now = datetime.now(timezone.utc)
    return render(recent, now)
