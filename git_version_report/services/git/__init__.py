"""Git-related services for git-version-report."""

from .repository import RepositoryValidator
from .local_state import LocalStateInspector
from .remotes import RemoteInspector
from .worktrees import WorktreeEnumerator

__all__ = [
    "RepositoryValidator",
    "LocalStateInspector",
    "RemoteInspector",
    "WorktreeEnumerator",
]
