"""Pytest fixtures for git-version-report tests"""
import logging
import tempfile
from pathlib import Path

import pytest
import git

from git_version_report.models.ref_state import RefState, RemoteOutcome, RemoteQueryResult, SyncStatus
from git_version_report.models.report import LocalState, Report
from git_version_report.models.worktree import LockState, WorkingTreeStatus, WorktreeEntry


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging() inside main()."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolve so paths match what git reports (e.g. /private/var on macOS)
        yield Path(tmpdir).resolve()


def configure_identity(repo):
    """Configure git user for commits."""
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


def commit_file(repo, name, content, message):
    """Write a file in the repo's working tree and commit it."""
    path = Path(repo.working_tree_dir) / name
    path.write_text(content)
    repo.git.add(name)
    repo.git.commit("-m", message)
    return repo.head.commit.hexsha


def add_bare_remote(repo, temp_dir, name, branch="main"):
    """Create a bare repository, register it as a remote and push ``branch``."""
    bare_path = temp_dir / f"{name}.git"
    git.Repo.init(bare_path, bare=True).close()
    repo.create_remote(name, str(bare_path))
    repo.git.push(name, branch)
    return bare_path


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one tagged commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    configure_identity(repo)

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch("-M", "main")
    repo.create_tag("v1.0.0")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_remotes(git_repo, temp_dir):
    """Repository whose main branch is pushed to both origin and upstream."""
    add_bare_remote(git_repo, temp_dir, "origin")
    add_bare_remote(git_repo, temp_dir, "upstream")
    git_repo.git.fetch("--all", "--quiet")
    yield git_repo


@pytest.fixture
def git_repo_upstream_differs(git_repo_with_remotes):
    """Local main equals origin/main while upstream/main is one commit older."""
    repo = git_repo_with_remotes
    commit_file(repo, "feature.txt", "Feature content\n", "Add feature")
    repo.git.push("origin", "main")
    yield repo


@pytest.fixture
def sample_report():
    """Report with local at abc1234, origin synced and upstream differing."""
    local_hash = "abc1234" + "0" * 33
    upstream_hash = "def5678" + "0" * 33
    return Report(
        repo_path="/work/project",
        upstream_branch="main",
        local=LocalState(
            ref=RefState("v1.2.0-3-gabc1234", local_hash, "main"),
            working_tree_status=WorkingTreeStatus.CLEAN,
        ),
        upstream=RemoteQueryResult(
            "upstream",
            "main",
            RemoteOutcome.RESOLVED,
            ref=RefState("v1.2.0", upstream_hash),
            sync_status=SyncStatus.BEHIND,
        ),
        origin=RemoteQueryResult(
            "origin",
            "main",
            RemoteOutcome.RESOLVED,
            ref=RefState("v1.2.0-3-gabc1234", local_hash),
            sync_status=SyncStatus.SYNCED,
        ),
    )


@pytest.fixture
def sample_worktrees():
    """Two worktrees: the current main checkout and a locked feature worktree."""
    return [
        WorktreeEntry(
            path="/work/project",
            branch_name="main",
            head_commit_id="abc1234" + "0" * 33,
            version_descriptor="v1.2.0-3-gabc1234",
            working_tree_status=WorkingTreeStatus.CLEAN,
            upstream_sync_status=SyncStatus.BEHIND,
            origin_sync_status=SyncStatus.SYNCED,
            is_current=True,
        ),
        WorktreeEntry(
            path="/work/project-feature-with-a-long-name",
            branch_name="feature/a-rather-long-branch-name",
            head_commit_id="9876543" + "0" * 33,
            lock_state=LockState.LOCKED,
            version_descriptor="v1.2.0-7-g9876543",
            working_tree_status=WorkingTreeStatus.MODIFIED,
            upstream_sync_status=SyncStatus.BEHIND,
            origin_sync_status=SyncStatus.MISSING,
        ),
    ]
