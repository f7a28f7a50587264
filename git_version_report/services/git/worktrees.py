"""Worktree enumeration service for git-version-report."""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import git

from git_version_report.constants import DETACHED_HEAD, ORIGIN_REMOTE, UNKNOWN, UPSTREAM_REMOTE
from git_version_report.exceptions import GitOperationError
from git_version_report.models.ref_state import SyncStatus, compare_commits
from git_version_report.models.worktree import LockState, WorkingTreeStatus, WorktreeEntry
from git_version_report.services.git.queries import (
    describe_commit,
    format_command_error,
    get_working_tree_status,
    resolve_commit,
)
from git_version_report.utils.logging import get_logger
from git_version_report.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


class WorktreeEnumerator:
    """Service for listing worktrees and computing their status."""

    def __init__(
        self,
        repo_path: str,
        upstream_branch: str,
        sequential: bool = False,
        workers: Optional[int] = None,
    ):
        """Initialize the worktree enumerator.

        Args:
            repo_path: Validated path the report was run against
            upstream_branch: Branch on the upstream remote to compare with
            sequential: Inspect worktrees one at a time
            workers: Worker pool size (None = auto-detect)
        """
        self.repo_path = repo_path
        self.upstream_branch = upstream_branch
        self.sequential = sequential
        self.workers = workers

    def _get_repo(self):
        """Get a thread-safe git.Repo instance.

        Creates a new repo instance for each call to ensure thread safety.

        Returns:
            git.Repo: A fresh repository instance
        """
        return git.Repo(self.repo_path, search_parent_directories=True)

    def _list_worktrees(self) -> str:
        """Run ``git worktree list --porcelain``."""
        try:
            repo = self._get_repo()
            return repo.git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            raise GitOperationError("worktree list", message=format_command_error(e)) from e

    @staticmethod
    def parse_worktree_list(output: str) -> List[WorktreeEntry]:
        """Parse porcelain worktree output into entries.

        Format (one block per worktree, blank line between blocks):
            worktree /path/to/worktree
            HEAD commit_sha
            branch refs/heads/branch-name | detached
            locked [reason]
            bare
            prunable [reason]

        Args:
            output: Output of ``git worktree list --porcelain``

        Returns:
            One WorktreeEntry per block, in listing order, bare entries included
        """
        entries: List[WorktreeEntry] = []
        record: Dict[str, Any] = {}

        def flush():
            if record.get("path"):
                branch = record.get("branch")
                is_detached = record.get("detached", False) or not branch
                entries.append(
                    WorktreeEntry(
                        path=record["path"],
                        branch_name=DETACHED_HEAD if is_detached else branch,
                        head_commit_id=record.get("HEAD", ""),
                        lock_state=LockState.LOCKED if record.get("locked") else LockState.UNLOCKED,
                        is_detached=is_detached,
                        is_bare=record.get("bare", False),
                        is_prunable=record.get("prunable", False),
                    )
                )
            record.clear()

        for line in output.splitlines():
            line = line.rstrip("\r")

            if not line.strip():
                # Empty line marks end of worktree entry
                flush()
                continue

            key, _, value = line.partition(" ")
            if key == "worktree":
                # Tolerate a missing blank line between records
                flush()
                record["path"] = value
            elif key == "HEAD":
                record["HEAD"] = value
            elif key == "branch":
                if value.startswith("refs/heads/"):
                    record["branch"] = value[len("refs/heads/"):]
                else:
                    record["branch"] = value
            elif key == "detached":
                record["detached"] = True
            elif key == "locked":
                record["locked"] = True
            elif key == "bare":
                record["bare"] = True
            elif key == "prunable":
                record["prunable"] = True

        # Handle last entry if no trailing blank line
        flush()
        return entries

    @staticmethod
    def find_current(entries: List[WorktreeEntry], path: str) -> Optional[WorktreeEntry]:
        """Find the worktree containing ``path``.

        When worktrees are nested the deepest one wins.
        """
        target = os.path.realpath(path)
        best: Optional[WorktreeEntry] = None
        best_len = -1
        for entry in entries:
            wt_path = os.path.realpath(entry.path)
            if target == wt_path or target.startswith(wt_path.rstrip(os.sep) + os.sep):
                if len(wt_path) > best_len:
                    best, best_len = entry, len(wt_path)
        return best

    def _inspect_worktree(self, entry: WorktreeEntry) -> WorktreeEntry:
        """Fill in version, cleanliness and sync status for one worktree."""
        repo = self._get_repo()

        if entry.head_commit_id:
            entry.version_descriptor = describe_commit(repo.git, entry.head_commit_id)
        else:
            entry.version_descriptor = UNKNOWN

        if entry.is_prunable or not os.path.isdir(entry.path):
            logger.debug(f"Worktree path {entry.path} doesn't exist (prunable)")
            entry.working_tree_status = WorkingTreeStatus.UNKNOWN
        else:
            entry.working_tree_status = get_working_tree_status(entry.path)

        if entry.is_detached:
            entry.upstream_sync_status = SyncStatus.NOT_APPLICABLE
            entry.origin_sync_status = SyncStatus.NOT_APPLICABLE
        else:
            upstream_id = resolve_commit(
                repo.git, f"refs/remotes/{UPSTREAM_REMOTE}/{self.upstream_branch}"
            )
            origin_id = resolve_commit(
                repo.git, f"refs/remotes/{ORIGIN_REMOTE}/{entry.branch_name}"
            )
            entry.upstream_sync_status = compare_commits(entry.head_commit_id, upstream_id)
            entry.origin_sync_status = compare_commits(entry.head_commit_id, origin_id)

        logger.debug(f"  {entry}")
        return entry

    def get_worktrees(self) -> List[WorktreeEntry]:
        """Get status of every linked worktree.

        Returns:
            WorktreeEntry list in listing order, or an empty list when the
            repository has no linked worktrees
        """
        try:
            output = self._list_worktrees()
        except GitOperationError as e:
            logger.debug(f"Could not list worktrees: {e}")
            return []

        # A bare repository entry has no working tree to inspect
        entries = [entry for entry in self.parse_worktree_list(output) if not entry.is_bare]
        logger.debug(f"Found {len(entries)} worktrees")
        if len(entries) <= 1:
            return []

        current = self.find_current(entries, self.repo_path)
        if current is not None:
            current.is_current = True

        if self.sequential or len(entries) <= 1:
            return [self._inspect_worktree(entry) for entry in entries]

        workers = get_optimal_worker_count(self.workers, len(entries))
        logger.debug(f"Inspecting {len(entries)} worktrees with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() keeps listing order regardless of completion order
            return list(executor.map(self._inspect_worktree, entries))
