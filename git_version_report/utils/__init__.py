"""Utility functions for git-version-report.

This package provides utility modules:
- logging: Logging configuration and logger creation
- threading: Worker pool sizing for worktree inspection
"""

from .logging import setup_logging, get_logger, ColoredFormatter
from .threading import get_optimal_worker_count

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "ColoredFormatter",
    # Threading
    "get_optimal_worker_count",
]
