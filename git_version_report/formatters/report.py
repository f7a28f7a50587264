"""Concise and verbose report layouts."""

from typing import List

from git_version_report.constants import (
    ADDITIONAL_REMOTES_TITLE,
    DETACHED_HEAD,
    LABEL_BRANCH,
    LABEL_LOCAL,
    LABEL_ORIGIN,
    LABEL_REPOSITORY,
    LABEL_STATUS,
    LABEL_UPSTREAM,
    REPORT_TITLE,
    SYMBOL_CURRENT_WORKTREE,
    SYMBOL_SYNCED,
    SYMBOL_WARNING,
    WORKTREE_COLUMNS,
    WORKTREES_TITLE,
)
from git_version_report.formatters.status import (
    format_lock_state,
    format_remote_placeholder,
    format_remote_status_line,
    format_sync_status,
    format_working_tree_status,
    short_hash,
)
from git_version_report.formatters.table import format_table, pad_cell
from git_version_report.models.ref_state import RefState, RemoteQueryResult
from git_version_report.models.report import LocalState, Report
from git_version_report.models.worktree import WorkingTreeStatus, WorktreeEntry


def _format_version(ref: RefState, verbose: bool) -> str:
    if verbose and ref.commit_id:
        return f"{ref.version_descriptor} ({short_hash(ref.commit_id)})"
    return ref.version_descriptor


def _format_local(local: LocalState, verbose: bool) -> List[str]:
    status = local.working_tree_status
    if status == WorkingTreeStatus.CLEAN:
        status_line = f"{SYMBOL_SYNCED} Status:         Clean"
    elif status == WorkingTreeStatus.MODIFIED:
        status_line = f"{SYMBOL_WARNING}  Status:         Modified (uncommitted changes)"
    else:
        status_line = f"{SYMBOL_WARNING}  Status:         {format_working_tree_status(status)}"

    return [
        f"{LABEL_BRANCH}{local.ref.branch_name or DETACHED_HEAD}",
        f"{LABEL_LOCAL}{_format_version(local.ref, verbose)}",
        status_line,
    ]


def _format_remote(label: str, result: RemoteQueryResult, verbose: bool) -> List[str]:
    """Format a remote line and, when resolved, its status line."""
    branch = result.branch or DETACHED_HEAD
    if not result.is_resolved:
        return [f"{label}{format_remote_placeholder(result.outcome)} [{branch}]"]

    return [
        f"{label}{_format_version(result.ref, verbose)} [{branch}]",
        f"{LABEL_STATUS}{format_remote_status_line(result.sync_status, result.remote)}",
    ]


def _format_worktree_row(entry: WorktreeEntry, verbose: bool) -> List[str]:
    branch = entry.branch_name
    if entry.is_current:
        branch = f"{branch} {SYMBOL_CURRENT_WORKTREE}"

    row = [
        entry.version_descriptor,
        format_sync_status(entry.upstream_sync_status),
        format_sync_status(entry.origin_sync_status),
        format_working_tree_status(entry.working_tree_status),
        branch,
    ]
    if verbose:
        row.extend([
            short_hash(entry.head_commit_id),
            entry.directory_name,
            format_lock_state(entry.lock_state),
        ])
    return row


def format_worktree_table(worktrees: List[WorktreeEntry], verbose: bool) -> List[str]:
    """Format the worktree table; verbose adds hash, directory and lock columns."""
    headers = [col.label for col in WORKTREE_COLUMNS if verbose or not col.verbose_only]
    rows = [_format_worktree_row(entry, verbose) for entry in worktrees]
    return format_table(headers, rows)


def render_report(report: Report, verbose: bool = False) -> List[str]:
    """
    Render a gathered report as text lines.

    This performs no git queries; everything shown comes from ``report``.

    Args:
        report: Aggregated report data
        verbose: Add commit hashes and extra worktree columns

    Returns:
        Report lines in display order
    """
    lines = [REPORT_TITLE]
    lines.append(f"{LABEL_REPOSITORY}{report.repo_path}")
    lines.append("")
    lines.extend(_format_local(report.local, verbose))
    lines.append("")
    lines.extend(_format_remote(LABEL_UPSTREAM, report.upstream, verbose))
    lines.append("")
    lines.extend(_format_remote(LABEL_ORIGIN, report.origin, verbose))

    if report.additional_remotes:
        lines.append("")
        lines.append(ADDITIONAL_REMOTES_TITLE)
        for result in report.additional_remotes:
            label = pad_cell(f"📡 {result.remote}:", len(LABEL_STATUS) - 1) + " "
            lines.extend(_format_remote(label, result, verbose))

    if report.worktrees:
        lines.append("")
        lines.append(WORKTREES_TITLE)
        lines.append("")
        lines.extend(format_worktree_table(report.worktrees, verbose))

    return lines
