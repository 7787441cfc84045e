"""Branch domain model for git-recent.

BranchEntry is one branch snapshot taken at query time.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class BranchEntry(BaseModel):
    """A branch, the time of its tip commit, and that commit's summary.

    Frozen: ranking and rendering reorder and select entries but never
    change them.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    is_head: bool = False
    commit_time: datetime
    summary: str = ""

    @field_validator("commit_time")
    @classmethod
    def _normalize_commit_time(cls, v: datetime) -> datetime:
        """Store as UTC with whole seconds; naive values are taken as UTC."""
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc).replace(microsecond=0)
