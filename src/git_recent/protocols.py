"""Protocol definitions for git-recent.

Defines the BranchProvider interface and the BranchListing result type
it returns. No pygit2 imports allowed in this module -- pure domain contracts.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from git_recent.exceptions import RecentError
from git_recent.models.branch import BranchEntry
from git_recent.models.config import BranchScope


@dataclass(frozen=True)
class BranchListing:
    """Result of one branch enumeration: either entries or an error.

    Carries no partial results. A failed listing has no entries.
    """

    entries: tuple[BranchEntry, ...] = ()
    error: Optional[RecentError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.entries:
            raise ValueError("a failed listing cannot carry entries")

    @classmethod
    def success(cls, entries: Iterable[BranchEntry]) -> BranchListing:
        return cls(entries=tuple(entries))

    @classmethod
    def failure(cls, error: RecentError) -> BranchListing:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[BranchEntry]:
        """Return the entries, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return list(self.entries)


@runtime_checkable
class BranchProvider(Protocol):
    """Source of branch snapshots for one repository.

    Implementations own whatever handle they hold and release it in close().
    """

    def list_branches(self, scope: BranchScope) -> BranchListing: ...

    def close(self) -> None: ...
