"""Custom exceptions for git-version-report"""

from typing import Optional


class GitVersionReportError(Exception):
    """Base exception for all git-version-report errors."""
    pass


class UsageError(GitVersionReportError):
    """Exception raised for invalid command-line arguments."""
    pass


class PathError(GitVersionReportError):
    """Exception raised when the target path cannot be used as a repository."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class DirectoryNotFoundError(PathError):
    """Exception raised when the target directory does not exist."""

    def __init__(self, path: str):
        super().__init__(path, f"Directory '{path}' does not exist")


class DirectoryAccessError(PathError):
    """Exception raised when the target directory cannot be entered."""

    def __init__(self, path: str):
        super().__init__(path, f"Cannot access directory '{path}'")


class NotARepositoryError(PathError):
    """Exception raised when the target directory is not a git working tree."""

    def __init__(self, path: str):
        super().__init__(path, f"'{path}' is not a git repository")


class GitOperationError(GitVersionReportError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, ref: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.ref = ref
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if ref:
            error_msg += f" for '{ref}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
