"""Data models for git-version-report."""

from .ref_state import RefState, RemoteOutcome, RemoteQueryResult, SyncStatus, compare_commits
from .worktree import LockState, WorkingTreeStatus, WorktreeEntry
from .report import LocalState, Report

__all__ = [
    "RefState",
    "RemoteOutcome",
    "RemoteQueryResult",
    "SyncStatus",
    "compare_commits",
    "LockState",
    "WorkingTreeStatus",
    "WorktreeEntry",
    "LocalState",
    "Report",
]
