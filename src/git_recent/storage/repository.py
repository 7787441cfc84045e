"""pygit2-backed branch provider.

Opens a git repository through libgit2 and snapshots its branches into
BranchEntry models. The provider owns the repository handle; use it as a
context manager so the handle is released on every exit path.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

import pygit2

from git_recent.exceptions import ProviderError, RepositoryNotFoundError
from git_recent.models.branch import BranchEntry
from git_recent.models.config import BranchScope
from git_recent.protocols import BranchListing

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

# Failures libgit2 surfaces while resolving refs and reading commits.
# InvalidSpecError (ref that cannot be peeled to a commit) and
# UnicodeDecodeError (undecodable name or message) are ValueErrors.
_LOOKUP_ERRORS = (pygit2.GitError, KeyError, ValueError)

# A whitespace run that crosses a line break
_LINE_BREAK_RUN = re.compile(r"\s*\n\s*")


def commit_summary(message: str) -> str:
    """Return git's summary of a commit message.

    The first paragraph (ended by an empty line) with leading and trailing
    whitespace trimmed. Each whitespace run containing a newline becomes a
    single space; other whitespace, such as tabs, is kept as-is.
    """
    paragraph = message.lstrip().split("\n\n", 1)[0]
    return _LINE_BREAK_RUN.sub(" ", paragraph.rstrip())


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return f"reference not found: {exc.args[0]}"
    return str(exc) or type(exc).__name__


class GitBranchProvider:
    """Branch provider over a pygit2 Repository.

    Example::

        with GitBranchProvider.open(".") as provider:
            entries = provider.list_branches(BranchScope.LOCAL).unwrap()
    """

    def __init__(self, repository: pygit2.Repository) -> None:
        self._repository: Optional[pygit2.Repository] = repository

    @classmethod
    def open(
        cls,
        path: str | os.PathLike[str] = ".",
        *,
        ceiling_dirs: Optional[Iterable[str | os.PathLike[str]]] = None,
    ) -> GitBranchProvider:
        """Open the repository containing *path*.

        Discovery walks up from *path* like ``git`` does, stopping at any of
        *ceiling_dirs*.

        Raises:
            RepositoryNotFoundError: No repository at or above *path*.
            ProviderError: A repository was found but could not be opened.
        """
        start = os.fspath(path)
        if not os.path.exists(start):
            raise RepositoryNotFoundError(start)

        try:
            if ceiling_dirs:
                ceiling = os.pathsep.join(os.fspath(d) for d in ceiling_dirs)
                found = pygit2.discover_repository(start, False, ceiling)
            else:
                found = pygit2.discover_repository(start)
        except pygit2.GitError as exc:
            raise ProviderError(_error_message(exc)) from exc

        if found is None:
            raise RepositoryNotFoundError(start)

        try:
            repository = pygit2.Repository(found)
        except _LOOKUP_ERRORS as exc:
            raise ProviderError(_error_message(exc)) from exc

        logger.debug("Opened repository at %s", found)
        return cls(repository)

    @property
    def closed(self) -> bool:
        return self._repository is None

    def list_branches(self, scope: BranchScope) -> BranchListing:
        """Snapshot every branch of *scope* whose tip resolves to a commit.

        A single unresolvable branch fails the whole listing. Remote
        branches are never marked as head.
        """
        if self._repository is None:
            return BranchListing.failure(ProviderError("repository is closed"))

        if scope is BranchScope.REMOTE:
            branches = self._repository.branches.remote
        else:
            branches = self._repository.branches.local

        entries: list[BranchEntry] = []
        try:
            for name in branches:
                branch = branches[name]
                commit = branch.peel(pygit2.Commit)
                entries.append(
                    BranchEntry(
                        name=name,
                        is_head=scope is BranchScope.LOCAL and branch.is_head(),
                        commit_time=datetime.fromtimestamp(
                            commit.commit_time, tz=timezone.utc
                        ),
                        summary=commit_summary(commit.message),
                    )
                )
        except _LOOKUP_ERRORS as exc:
            logger.debug("Branch enumeration failed (%s scope)", scope, exc_info=True)
            error = ProviderError(_error_message(exc))
            error.__cause__ = exc
            return BranchListing.failure(error)

        logger.debug("Listed %d %s branches", len(entries), scope)
        return BranchListing.success(entries)

    def close(self) -> None:
        """Release the repository handle. Safe to call more than once."""
        if self._repository is None:
            return
        repository, self._repository = self._repository, None
        repository.free()

    def __enter__(self) -> GitBranchProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
