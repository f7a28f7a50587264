"""Ref state model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class SyncStatus(Enum):
    """How a commit compares with a reference commit.

    Ahead, behind and diverged are all reported as BEHIND.
    """
    SYNCED = "synced"
    BEHIND = "behind"
    MISSING = "missing"
    NOT_APPLICABLE = "n/a"


class RemoteOutcome(Enum):
    """Result of querying one remote branch."""
    RESOLVED = "resolved"
    NOT_CONFIGURED = "not-configured"
    FETCH_FAILED = "fetch-failed"
    BRANCH_MISSING = "branch-missing"


@dataclass(frozen=True)
class RefState:
    """Version information for a single ref."""
    version_descriptor: str
    commit_id: Optional[str]  # None = no commits yet
    branch_name: Optional[str] = None  # None = detached HEAD or a remote ref


@dataclass(frozen=True)
class RemoteQueryResult:
    """Outcome of inspecting ``remote/branch``."""
    remote: str
    branch: Optional[str]
    outcome: RemoteOutcome
    ref: Optional[RefState] = None  # Only set when outcome is RESOLVED
    sync_status: SyncStatus = SyncStatus.NOT_APPLICABLE

    @property
    def is_resolved(self) -> bool:
        return self.outcome == RemoteOutcome.RESOLVED and self.ref is not None


def compare_commits(commit_id: Optional[str], reference_id: Optional[str]) -> SyncStatus:
    """Compare a commit with the commit of a reference ref.

    Args:
        commit_id: Commit being checked (None when it could not be read)
        reference_id: Commit of the ref compared against (None when the ref is absent)

    Returns:
        MISSING if the reference is absent, SYNCED on an exact match, BEHIND otherwise
    """
    if not reference_id:
        return SyncStatus.MISSING
    if commit_id == reference_id:
        return SyncStatus.SYNCED
    return SyncStatus.BEHIND
