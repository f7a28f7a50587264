"""
git-version-report - Version and sync status of a git repository and its worktrees
"""

from .__version__ import __version__
from .core import VersionReporter
from .cli.main import main

__all__ = ["VersionReporter", "main", "__version__"]
