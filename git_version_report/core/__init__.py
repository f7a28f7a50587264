"""Core functionality for git-version-report"""

from .version_reporter import VersionReporter

__all__ = ["VersionReporter"]
