"""git-recent CLI -- list the most recently active branches.

Loaded via the ``git-recent`` entry point defined in pyproject.toml, or
``python -m git_recent``.
"""

from __future__ import annotations

import click

from git_recent._version import __version__
from git_recent.cli.formatting import (
    format_error,
    get_console,
    get_error_console,
    print_lines,
)
from git_recent.exceptions import RecentError
from git_recent.models.config import DEFAULT_COUNT, BranchScope, QueryOptions


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-n",
    "--count",
    default=DEFAULT_COUNT,
    show_default=True,
    type=click.IntRange(min=0),
    help="Show at most N branches, zero means all branches.",
)
@click.option(
    "--remote",
    is_flag=True,
    help="Show remote branches instead of local branches.",
)
@click.option(
    "-C",
    "--repo",
    default=".",
    envvar="GIT_RECENT_REPO",
    type=click.Path(file_okay=False),
    help="Start repository discovery from this directory.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
@click.version_option(__version__, prog_name="git-recent")
def cli(count: int, remote: bool, repo: str, verbose: bool) -> None:
    """Show the most recently committed-to branches, newest first."""
    from git_recent.operations.query import recent_branches

    if verbose:
        from git_recent.log import setup_logging

        setup_logging("DEBUG")

    options = QueryOptions(
        count=count,
        scope=BranchScope.REMOTE if remote else BranchScope.LOCAL,
    )
    try:
        lines = recent_branches(options, repo)
    except RecentError as e:
        format_error(str(e), get_error_console())
        raise SystemExit(1) from None

    print_lines(lines, get_console())
