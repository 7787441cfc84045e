"""git-recent exception hierarchy.

All git-recent exceptions inherit from RecentError.
"""


class RecentError(Exception):
    """Base exception for all git-recent errors."""


class RepositoryNotFoundError(RecentError):
    """Raised when no repository exists at or above the given path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"repository not found: {path}")


class ProviderError(RecentError):
    """Raised when the repository cannot be opened or a branch cannot be resolved.

    The message is the underlying git library's own message.
    """
