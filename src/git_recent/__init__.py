"""git-recent: the most recently active branches of a git repository.

Lists branches ranked by the time of their tip commit and renders them
as a short aligned table with relative ages.
"""

from git_recent._version import __version__

# Errors
from git_recent.exceptions import ProviderError, RecentError, RepositoryNotFoundError

# Models
from git_recent.models.branch import BranchEntry
from git_recent.models.config import BranchScope, QueryOptions

# Protocols and results
from git_recent.protocols import BranchListing, BranchProvider

# Provider
from git_recent.storage.repository import GitBranchProvider

# Ranking, rendering and the full query
from git_recent.operations.ranking import select_recent
from git_recent.formatting import format_duration, render
from git_recent.operations.query import collect_recent, recent_branches

__all__ = [
    "__version__",
    "BranchEntry",
    "BranchListing",
    "BranchProvider",
    "BranchScope",
    "GitBranchProvider",
    "ProviderError",
    "QueryOptions",
    "RecentError",
    "RepositoryNotFoundError",
    "collect_recent",
    "format_duration",
    "recent_branches",
    "render",
    "select_recent",
]
