"""Query configuration for git-recent.

QueryOptions holds the per-run settings: how many branches to show and
which branch namespace to read.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

DEFAULT_COUNT = 7


class BranchScope(str, enum.Enum):
    """Which branch namespace to enumerate."""

    LOCAL = "local"
    REMOTE = "remote"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class QueryOptions(BaseModel):
    """Per-run query options."""

    model_config = {"frozen": True}

    count: int = Field(default=DEFAULT_COUNT, ge=0)  # 0 = all branches
    scope: BranchScope = BranchScope.LOCAL
