"""Shared constants for git-version-report."""

from dataclasses import dataclass
from typing import List


DEFAULT_UPSTREAM_BRANCH = "main"
ORIGIN_REMOTE = "origin"
UPSTREAM_REMOTE = "upstream"

DETACHED_HEAD = "HEAD (detached)"
UNKNOWN = "unknown"
SHORT_HASH_LENGTH = 8


@dataclass
class ColumnDefinition:
    """Definition of a worktree table column."""

    key: str
    label: str
    verbose_only: bool = False


# Minimum width of each column is the length of its label
WORKTREE_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("version", "Version"),
    ColumnDefinition("upstream", "Upstream"),
    ColumnDefinition("origin", "Origin"),
    ColumnDefinition("status", "Status"),
    ColumnDefinition("branch", "Branch"),
    ColumnDefinition("hash", "Hash", verbose_only=True),
    ColumnDefinition("directory", "Directory", verbose_only=True),
    ColumnDefinition("lock", "Lock", verbose_only=True),
]

COLUMN_SEPARATOR = "  "


# Symbol constants
SYMBOL_CURRENT_WORKTREE = "📍"
SYMBOL_SYNCED = "✅"
SYMBOL_WARNING = "⚠️"
SYMBOL_MISSING = "❌"


# Header line labels, padded so values line up
LABEL_REPOSITORY = "📁 Repository:     "
LABEL_BRANCH = "📍 Current Branch: "
LABEL_LOCAL = "🏠 Local Version:  "
LABEL_UPSTREAM = "⬆️  Upstream:      "
LABEL_ORIGIN = "🌐 Origin:        "
LABEL_STATUS = "   Status:        "

REPORT_TITLE = "=== Git Repository Version Information ==="
ADDITIONAL_REMOTES_TITLE = "🔗 Additional Remotes:"
WORKTREES_TITLE = "🌳 Git Worktrees:"


# Placeholders for remotes that could not be resolved
PLACEHOLDER_NOT_CONFIGURED = "Not configured"
PLACEHOLDER_FETCH_FAILED = "Not accessible (fetch failed)"
PLACEHOLDER_BRANCH_MISSING = "Branch not found"
