"""Remote inspection service for git-version-report."""

from typing import List, Optional

import git

from git_version_report.constants import ORIGIN_REMOTE, UPSTREAM_REMOTE
from git_version_report.models.ref_state import RefState, RemoteOutcome, RemoteQueryResult
from git_version_report.services.git.queries import (
    describe_commit,
    format_command_error,
    resolve_commit,
)
from git_version_report.utils.logging import get_logger

logger = get_logger(__name__)


class RemoteInspector:
    """Service for fetching a remote and reading one of its branches."""

    def __init__(self, repo_path: str, fetch_timeout: Optional[float] = None):
        """Initialize the remote inspector.

        Args:
            repo_path: Validated path to the git working tree
            fetch_timeout: Seconds before a fetch is killed (None = no limit)
        """
        self.repo_path = repo_path
        self.fetch_timeout = fetch_timeout

    def _get_repo(self):
        """Get a fresh git.Repo instance.

        Returns:
            git.Repo: A fresh repository instance
        """
        return git.Repo(self.repo_path, search_parent_directories=True)

    def get_configured_remotes(self) -> List[str]:
        """Get the names of all configured remotes, sorted by name."""
        try:
            repo = self._get_repo()
            return sorted(remote.name for remote in repo.remotes)
        except git.exc.GitCommandError as e:
            logger.debug(f"Could not list remotes: {format_command_error(e)}")
            return []

    def get_additional_remotes(self) -> List[str]:
        """Get configured remotes other than origin and upstream."""
        return [
            name
            for name in self.get_configured_remotes()
            if name not in (ORIGIN_REMOTE, UPSTREAM_REMOTE)
        ]

    def fetch(self, remote_name: str) -> bool:
        """Fetch a remote without touching the working tree.

        Credential prompts are disabled so an unauthenticated remote fails
        instead of blocking on input.

        Returns:
            True if the fetch succeeded
        """
        repo = self._get_repo()
        try:
            with repo.git.custom_environment(GIT_TERMINAL_PROMPT="0"):
                repo.git.fetch(remote_name, "--quiet", kill_after_timeout=self.fetch_timeout)
            logger.debug(f"Fetched {remote_name}")
            return True
        except git.exc.GitCommandError as e:
            logger.warning(f"Could not fetch '{remote_name}': {format_command_error(e)}")
            return False

    def inspect(self, remote_name: str, branch_name: Optional[str]) -> RemoteQueryResult:
        """Fetch a remote and read the version of ``remote/branch``.

        Failures never raise; they are reported through the result outcome.

        Args:
            remote_name: Name of the remote, e.g. "origin"
            branch_name: Branch on that remote, or None when there is no
                branch to compare against (detached HEAD)

        Returns:
            RemoteQueryResult; only RESOLVED results carry a RefState
        """
        if remote_name not in self.get_configured_remotes():
            logger.debug(f"Remote '{remote_name}' is not configured")
            return RemoteQueryResult(remote_name, branch_name, RemoteOutcome.NOT_CONFIGURED)

        if not branch_name:
            logger.debug(f"No branch to compare on '{remote_name}', skipping fetch")
            return RemoteQueryResult(remote_name, branch_name, RemoteOutcome.BRANCH_MISSING)

        if not self.fetch(remote_name):
            return RemoteQueryResult(remote_name, branch_name, RemoteOutcome.FETCH_FAILED)

        repo = self._get_repo()
        ref = f"refs/remotes/{remote_name}/{branch_name}"
        commit_id = resolve_commit(repo.git, ref)
        if commit_id is None:
            logger.debug(f"Branch '{branch_name}' not found on '{remote_name}'")
            return RemoteQueryResult(remote_name, branch_name, RemoteOutcome.BRANCH_MISSING)

        version = describe_commit(repo.git, ref)
        return RemoteQueryResult(
            remote_name,
            branch_name,
            RemoteOutcome.RESOLVED,
            ref=RefState(version_descriptor=version, commit_id=commit_id),
        )
