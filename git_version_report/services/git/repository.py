"""Repository path validation."""

import os
from pathlib import Path

import git

from git_version_report.exceptions import (
    DirectoryAccessError,
    DirectoryNotFoundError,
    NotARepositoryError,
)
from git_version_report.utils.logging import get_logger

logger = get_logger(__name__)


class RepositoryValidator:
    """Resolve a user-supplied path to a git working tree."""

    @staticmethod
    def validate(path: str) -> str:
        """Check that ``path`` is a directory inside a git working tree.

        Args:
            path: Path as given on the command line, possibly relative

        Returns:
            Canonical absolute path of the directory

        Raises:
            DirectoryNotFoundError: path is not an existing directory
            DirectoryAccessError: directory cannot be entered
            NotARepositoryError: directory is not inside a working tree
        """
        if not os.path.isdir(path):
            raise DirectoryNotFoundError(path)

        if not os.access(path, os.X_OK):
            raise DirectoryAccessError(path)

        try:
            abs_path = str(Path(path).resolve(strict=True))
        except OSError as e:
            logger.debug(f"Could not resolve {path}: {e}")
            raise DirectoryAccessError(path) from e

        try:
            inside = git.Git(abs_path).rev_parse("--is-inside-work-tree")
        except git.exc.GitCommandError as e:
            logger.debug(f"rev-parse failed in {abs_path}: {e}")
            raise NotARepositoryError(abs_path) from e

        # Inside a .git directory git answers "false"
        if inside.strip() != "true":
            raise NotARepositoryError(abs_path)

        logger.debug(f"Validated repository at {abs_path}")
        return abs_path
