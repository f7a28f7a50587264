"""Aggregated report model."""

from dataclasses import dataclass, field
from typing import List

from git_version_report.models.ref_state import RefState, RemoteQueryResult
from git_version_report.models.worktree import WorkingTreeStatus, WorktreeEntry


@dataclass
class LocalState:
    """State of the checkout the report was run against."""
    ref: RefState
    working_tree_status: WorkingTreeStatus


@dataclass
class Report:
    """Everything gathered in one run, in display order."""
    repo_path: str
    upstream_branch: str
    local: LocalState
    upstream: RemoteQueryResult
    origin: RemoteQueryResult
    additional_remotes: List[RemoteQueryResult] = field(default_factory=list)
    worktrees: List[WorktreeEntry] = field(default_factory=list)
