"""Local checkout inspection."""

from typing import Optional

import git

from git_version_report.constants import DETACHED_HEAD, UNKNOWN
from git_version_report.models.ref_state import RefState
from git_version_report.models.report import LocalState
from git_version_report.models.worktree import WorkingTreeStatus
from git_version_report.services.git.queries import describe_commit, get_working_tree_status
from git_version_report.utils.logging import get_logger

logger = get_logger(__name__)


class LocalStateInspector:
    """Service for reading the state of the local checkout."""

    def __init__(self, repo_path: str):
        """Initialize the inspector.

        Args:
            repo_path: Validated path to the git working tree
        """
        self.repo_path = repo_path

    def _get_repo(self):
        """Get a fresh git.Repo instance.

        A new instance per call means HEAD is always read at query time.

        Returns:
            git.Repo: A fresh repository instance
        """
        return git.Repo(self.repo_path, search_parent_directories=True)

    def get_current_branch(self) -> Optional[str]:
        """Get the checked-out branch name, or None when HEAD is detached."""
        repo = self._get_repo()
        try:
            return repo.active_branch.name
        except TypeError:
            logger.debug("HEAD is detached")
            return None

    def get_ref_state(self) -> RefState:
        """Get version descriptor, commit id and branch of HEAD."""
        repo = self._get_repo()

        try:
            commit_id: Optional[str] = repo.head.commit.hexsha
        except ValueError:
            # Unborn branch: repository has no commits yet
            logger.debug("HEAD has no commits")
            commit_id = None

        version = describe_commit(repo.git, "HEAD") if commit_id else UNKNOWN
        return RefState(
            version_descriptor=version,
            commit_id=commit_id,
            branch_name=self.get_current_branch(),
        )

    def get_working_tree_status(self) -> WorkingTreeStatus:
        """Get clean/modified status of the local working tree."""
        return get_working_tree_status(self.repo_path)

    def get_local_state(self) -> LocalState:
        """Get the full local state for the report header."""
        ref = self.get_ref_state()
        status = self.get_working_tree_status()
        logger.debug(
            f"Local state: branch={ref.branch_name or DETACHED_HEAD} "
            f"version={ref.version_descriptor} status={status.value}"
        )
        return LocalState(ref=ref, working_tree_status=status)
