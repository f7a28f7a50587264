"""Report orchestration for git-version-report"""

import dataclasses
from typing import Optional, Union

from git_version_report.config import Config
from git_version_report.constants import ORIGIN_REMOTE, UPSTREAM_REMOTE
from git_version_report.models.ref_state import RemoteQueryResult, compare_commits
from git_version_report.models.report import Report
from git_version_report.services.display_service import DisplayService
from git_version_report.services.git import (
    LocalStateInspector,
    RemoteInspector,
    RepositoryValidator,
    WorktreeEnumerator,
)
from git_version_report.utils.logging import get_logger

logger = get_logger(__name__)


class VersionReporter:
    """Gathers local, remote and worktree state into one report."""

    def __init__(self, config: Union[Config, dict], repo_path: Optional[str] = None):
        """Initialize VersionReporter.

        Args:
            config: Configuration dict or Config object
            repo_path: Path to the repository; defaults to ``config.repo_path``

        Raises:
            PathError: the path is not a usable git working tree
        """
        # Convert dict to Config if needed
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.repo_path = RepositoryValidator.validate(repo_path or self.config.repo_path)

        # Initialize services
        self.local_inspector = LocalStateInspector(self.repo_path)
        self.remote_inspector = RemoteInspector(
            self.repo_path, fetch_timeout=self.config.fetch_timeout
        )
        self.worktree_enumerator = WorktreeEnumerator(
            self.repo_path,
            upstream_branch=self.config.upstream_branch,
            # Debug mode forces sequential processing for readable logs
            sequential=self.config.sequential or self.config.debug,
            workers=self.config.workers,
        )
        self.display_service = DisplayService(verbose=self.config.verbose)

    def _query_remote(
        self,
        remote_name: str,
        branch_name: Optional[str],
        local_commit: Optional[str],
    ) -> RemoteQueryResult:
        """Inspect one remote and compare it with local HEAD."""
        result = self.remote_inspector.inspect(remote_name, branch_name)
        if result.is_resolved:
            result = dataclasses.replace(
                result, sync_status=compare_commits(local_commit, result.ref.commit_id)
            )
        logger.debug(f"{remote_name}/{branch_name}: {result.outcome.value}")
        return result

    def build_report(self) -> Report:
        """Query git and assemble the report. Nothing is printed."""
        local = self.local_inspector.get_local_state()
        local_commit = local.ref.commit_id
        current_branch = local.ref.branch_name

        # upstream follows the configured branch, every other remote the current one
        upstream = self._query_remote(UPSTREAM_REMOTE, self.config.upstream_branch, local_commit)
        origin = self._query_remote(ORIGIN_REMOTE, current_branch, local_commit)

        additional = []
        if self.config.show_all_remotes:
            for remote_name in self.remote_inspector.get_additional_remotes():
                additional.append(self._query_remote(remote_name, current_branch, local_commit))

        worktrees = self.worktree_enumerator.get_worktrees()

        return Report(
            repo_path=self.repo_path,
            upstream_branch=self.config.upstream_branch,
            local=local,
            upstream=upstream,
            origin=origin,
            additional_remotes=additional,
            worktrees=worktrees,
        )

    def run(self) -> Report:
        """Build the report and print it."""
        report = self.build_report()
        self.display_service.display_report(report)
        return report
