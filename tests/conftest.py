"""Shared test fixtures for git-recent.

Builds real git repositories in tmp_path with pygit2, so tests need no
``git`` binary. Commit times are set through the signature, relative to
a fixed NOW unless a test passes its own reference time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pygit2
import pytest

from git_recent.log import LOGGER_NAME

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def commit_at(
    repo: pygit2.Repository, refname: str, message: str, when: datetime
) -> pygit2.Oid:
    """Create a root commit with an empty tree at *when* and point *refname* at it."""
    tree = repo.TreeBuilder().write()
    sig = pygit2.Signature("Tester", "test@example.com", int(when.timestamp()), 0)
    return repo.create_commit(refname, sig, sig, message, tree, [])


def make_repo(
    path: Path,
    branches: Sequence[tuple[str, timedelta, str]] = (),
    *,
    head: str | None = None,
    remote: Sequence[tuple[str, timedelta, str]] = (),
    now: datetime = NOW,
) -> pygit2.Repository:
    """Init a repository with one root commit per branch.

    Args:
        path: Working directory for the new repository.
        branches: (name, age, message) for each local branch.
        head: Local branch HEAD points at. None leaves HEAD unborn.
        remote: (name, age, message) for each ``origin/<name>`` branch.
        now: Reference time that ages are subtracted from.
    """
    repo = pygit2.init_repository(str(path))
    for name, age, message in branches:
        commit_at(repo, f"refs/heads/{name}", message, now - age)
    for name, age, message in remote:
        commit_at(repo, f"refs/remotes/origin/{name}", message, now - age)
    repo.set_head(f"refs/heads/{head or 'unborn'}")
    return repo


SCENARIO_BRANCHES = [
    ("main", timedelta(hours=2), "Fix parser crash"),
    ("feature-x", timedelta(days=1, hours=5), "Add feature x"),
    ("old", timedelta(days=40), "Initial import"),
]


@pytest.fixture
def scenario_repo(tmp_path: Path) -> Path:
    """main (HEAD, 2h), feature-x (1d5h), old (40d)."""
    path = tmp_path / "scenario"
    make_repo(path, SCENARIO_BRANCHES, head="main").free()
    return path


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """A freshly initialised repository with no commits or branches."""
    path = tmp_path / "empty"
    pygit2.init_repository(str(path)).free()
    return path


@pytest.fixture
def clean_logger():
    """Restore the git_recent logger after a test configures it."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
