"""Configuration handling for git-version-report"""

from dataclasses import dataclass
from typing import Optional

from git_version_report.constants import DEFAULT_UPSTREAM_BRANCH


@dataclass
class Config:
    """Configuration for one report run, with validation."""

    # Target repository (validated separately, may be relative here)
    repo_path: str = "."
    upstream_branch: str = DEFAULT_UPSTREAM_BRANCH

    # Output
    verbose: bool = False
    show_all_remotes: bool = False
    debug: bool = False

    # Execution
    fetch_timeout: Optional[float] = None  # Seconds; None waits indefinitely
    sequential: bool = False  # Inspect worktrees one at a time
    workers: Optional[int] = None  # Worker pool size (None = auto-detect)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_upstream_branch()
        self._validate_fetch_timeout()
        self._validate_workers()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path:
            raise ValueError("repository path cannot be empty")

    def _validate_upstream_branch(self):
        """Validate upstream_branch is not empty."""
        if not self.upstream_branch or not self.upstream_branch.strip():
            raise ValueError("--upstream-branch requires a branch name")
        self.upstream_branch = self.upstream_branch.strip()

    def _validate_fetch_timeout(self):
        """Validate fetch_timeout is positive when set."""
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")

    def _validate_workers(self):
        """Validate workers is positive when set."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "upstream_branch": self.upstream_branch,
            "verbose": self.verbose,
            "show_all_remotes": self.show_all_remotes,
            "debug": self.debug,
            "fetch_timeout": self.fetch_timeout,
            "sequential": self.sequential,
            "workers": self.workers,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "repo_path",
            "upstream_branch",
            "verbose",
            "show_all_remotes",
            "debug",
            "fetch_timeout",
            "sequential",
            "workers",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
