"""Worktree data models."""

import os
from dataclasses import dataclass
from enum import Enum

from git_version_report.models.ref_state import SyncStatus


class WorkingTreeStatus(Enum):
    """Cleanliness of a working tree."""
    CLEAN = "clean"
    MODIFIED = "modified"
    UNKNOWN = "unknown"  # Directory missing


class LockState(Enum):
    """Lock state reported by ``git worktree list``."""
    LOCKED = "locked"
    UNLOCKED = "unlocked"


@dataclass
class WorktreeEntry:
    """Information about a git worktree."""

    path: str
    branch_name: str  # Branch name or the detached marker
    head_commit_id: str
    lock_state: LockState = LockState.UNLOCKED
    is_detached: bool = False
    is_bare: bool = False
    is_prunable: bool = False  # Git reports the directory as gone
    version_descriptor: str = ""
    working_tree_status: WorkingTreeStatus = WorkingTreeStatus.UNKNOWN
    upstream_sync_status: SyncStatus = SyncStatus.NOT_APPLICABLE
    origin_sync_status: SyncStatus = SyncStatus.NOT_APPLICABLE
    is_current: bool = False

    @property
    def directory_name(self) -> str:
        return os.path.basename(self.path.rstrip(os.sep)) or self.path

    def __str__(self) -> str:
        """String representation of worktree."""
        current_marker = " (current)" if self.is_current else ""
        return f"{self.branch_name} @ {self.path}{current_marker} [{self.lock_state.value}]"
