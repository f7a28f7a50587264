"""Read-only git queries shared by the inspectors."""

from typing import Optional

import git

from git_version_report.constants import UNKNOWN
from git_version_report.models.worktree import WorkingTreeStatus
from git_version_report.utils.logging import get_logger

logger = get_logger(__name__)


def format_command_error(error: git.exc.GitCommandError) -> str:
    """Build a one-line description of a failed git command."""
    stderr = (error.stderr if hasattr(error, "stderr") and error.stderr else str(error)).strip()
    status = error.status if hasattr(error, "status") else "unknown"
    # GitPython prefixes captured stderr with "stderr: '...'"
    stderr = " ".join(line.strip() for line in stderr.splitlines() if line.strip())
    if stderr:
        return f"exit {status}: {stderr}"
    return f"exit code {status}"


def describe_commit(git_cmd: git.Git, rev: str) -> str:
    """Describe a commit by its nearest tag, or its abbreviated id when untagged.

    Args:
        git_cmd: Command runner bound to the repository
        rev: Any revision git understands

    Returns:
        ``git describe --tags --always`` output, or "unknown" on failure
    """
    try:
        return git_cmd.describe("--tags", "--always", rev).strip()
    except git.exc.GitCommandError as e:
        logger.debug(f"Could not describe {rev}: {format_command_error(e)}")
        return UNKNOWN


def resolve_commit(git_cmd: git.Git, ref: str) -> Optional[str]:
    """Resolve a ref to its full commit id.

    Returns:
        The 40-character commit id, or None if the ref does not exist
    """
    try:
        return git_cmd.rev_parse("--verify", "--quiet", f"{ref}^{{commit}}").strip() or None
    except git.exc.GitCommandError:
        logger.debug(f"Ref {ref} does not exist")
        return None


def get_working_tree_status(path: str) -> WorkingTreeStatus:
    """Classify a working tree as clean or modified.

    Any line of ``git status --porcelain`` output (staged, unstaged or
    untracked) counts as a modification. Nothing is written to the tree.

    Args:
        path: Path to the working tree directory

    Returns:
        CLEAN, MODIFIED, or UNKNOWN if git status could not run
    """
    try:
        status = git.Git(path).status("--porcelain")
    except git.exc.GitCommandError as e:
        logger.warning(f"Could not check working tree status for {path}: {format_command_error(e)}")
        return WorkingTreeStatus.UNKNOWN

    if status.strip():
        return WorkingTreeStatus.MODIFIED
    return WorkingTreeStatus.CLEAN
