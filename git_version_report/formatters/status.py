"""Status and placeholder formatting utilities."""

from typing import Optional

from git_version_report.constants import (
    PLACEHOLDER_BRANCH_MISSING,
    PLACEHOLDER_FETCH_FAILED,
    PLACEHOLDER_NOT_CONFIGURED,
    SHORT_HASH_LENGTH,
    SYMBOL_MISSING,
    SYMBOL_SYNCED,
    SYMBOL_WARNING,
    UNKNOWN,
)
from git_version_report.models.ref_state import RemoteOutcome, SyncStatus
from git_version_report.models.worktree import LockState, WorkingTreeStatus


SYNC_STATUS_DISPLAY = {
    SyncStatus.SYNCED: f"{SYMBOL_SYNCED} Synced",
    SyncStatus.BEHIND: f"{SYMBOL_WARNING}  Behind",
    SyncStatus.MISSING: f"{SYMBOL_MISSING} Missing",
    SyncStatus.NOT_APPLICABLE: "N/A",
}

WORKING_TREE_DISPLAY = {
    WorkingTreeStatus.CLEAN: "Clean",
    WorkingTreeStatus.MODIFIED: "Modified",
    WorkingTreeStatus.UNKNOWN: UNKNOWN,
}

REMOTE_PLACEHOLDERS = {
    RemoteOutcome.NOT_CONFIGURED: PLACEHOLDER_NOT_CONFIGURED,
    RemoteOutcome.FETCH_FAILED: PLACEHOLDER_FETCH_FAILED,
    RemoteOutcome.BRANCH_MISSING: PLACEHOLDER_BRANCH_MISSING,
}


def format_sync_status(status: SyncStatus) -> str:
    """Format a worktree sync status as a table cell."""
    return SYNC_STATUS_DISPLAY[status]


def format_working_tree_status(status: WorkingTreeStatus) -> str:
    """Format working tree cleanliness as a table cell."""
    return WORKING_TREE_DISPLAY[status]


def format_lock_state(lock_state: LockState) -> str:
    return lock_state.value


def format_remote_placeholder(outcome: RemoteOutcome) -> str:
    """
    Text shown in place of a version for a remote that could not be read.

    Args:
        outcome: Outcome of the remote query (must not be RESOLVED)

    Returns:
        Fixed human-readable placeholder
    """
    return REMOTE_PLACEHOLDERS[outcome]


def format_remote_status_line(status: SyncStatus, remote: str) -> str:
    """
    Format the comparison of local HEAD with a remote branch.

    Args:
        status: SYNCED or BEHIND
        remote: Remote name shown in the message

    Returns:
        e.g. "✅ Synced (up to date with origin)" or "⚠️  Local differs from upstream"
    """
    if status == SyncStatus.SYNCED:
        return f"{SYMBOL_SYNCED} Synced (up to date with {remote})"
    return f"{SYMBOL_WARNING}  Local differs from {remote}"


def short_hash(commit_id: Optional[str]) -> str:
    """Abbreviate a commit id for display."""
    if not commit_id:
        return UNKNOWN
    return commit_id[:SHORT_HASH_LENGTH]
