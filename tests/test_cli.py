"""Tests for the command-line interface"""
import pytest

from git_version_report.cli import main, parse_args
from git_version_report.exceptions import UsageError
from git_version_report.utils.logging import get_logger


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        """Test defaults with no arguments."""
        args = parse_args([])
        assert args.path == "."
        assert args.upstream_branch == "main"
        assert args.verbose is False
        assert args.show_all_remotes is False

    def test_leading_path(self):
        """Test the first token is the repository path."""
        args = parse_args(["/srv/repo", "-v", "-a"])
        assert args.path == "/srv/repo"
        assert args.verbose is True
        assert args.show_all_remotes is True

    def test_path_after_options_is_rejected(self):
        """Test PATH is only recognized in first position."""
        with pytest.raises(UsageError, match="Unknown option '/srv/repo'"):
            parse_args(["-v", "/srv/repo"])

    def test_upstream_branch(self):
        """Test short, long and inline forms of --upstream-branch."""
        assert parse_args(["-u", "develop"]).upstream_branch == "develop"
        assert parse_args([".", "--upstream-branch", "develop"]).upstream_branch == "develop"
        assert parse_args(["--upstream-branch=develop"]).upstream_branch == "develop"

    def test_upstream_branch_missing_value(self):
        """Test -u without a value."""
        with pytest.raises(UsageError, match="upstream-branch"):
            parse_args(["-u"])

    def test_unknown_option(self):
        """Test an unknown option is named in the error."""
        with pytest.raises(UsageError, match="--bogus"):
            parse_args(["--bogus"])

    def test_no_prefix_abbreviation(self):
        """Test option prefixes are not expanded."""
        with pytest.raises(UsageError, match="--verb"):
            parse_args(["--verb"])

    def test_combined_short_flags(self):
        """Test -av sets both flags."""
        args = parse_args(["-av"])
        assert args.show_all_remotes is True
        assert args.verbose is True

    def test_execution_options(self):
        """Test timeout and worker options."""
        args = parse_args(["--fetch-timeout", "2.5", "--workers", "3", "--sequential", "--debug"])
        assert args.fetch_timeout == 2.5
        assert args.workers == 3
        assert args.sequential is True
        assert args.debug is True


class TestMainUsage:
    """Test exit codes and streams for usage errors and help."""

    @pytest.mark.parametrize("argv", [["-h"], ["--help"], ["--bogus", "-h"], ["/no/such/dir", "--help"], ["-u", "-h"]])
    def test_help_takes_precedence(self, argv, capsys):
        """Test help wins wherever it appears."""
        assert main(argv) == 0
        out, _ = capsys.readouterr()
        assert "usage:" in out
        assert "--upstream-branch" in out

    def test_unknown_flag(self, capsys):
        """Test --bogus exits 1 and prints nothing on stdout."""
        assert main(["--bogus"]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "--bogus" in err

    def test_missing_upstream_value(self, capsys):
        """Test -u with no branch."""
        assert main(["-u"]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "Error" in err

    def test_empty_upstream_value(self, git_repo, capsys):
        """Test an empty branch name is a usage error."""
        assert main([git_repo.working_tree_dir, "-u", " "]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "requires a branch name" in err

    def test_invalid_fetch_timeout(self, git_repo, capsys):
        """Test a non-positive timeout is rejected."""
        assert main([git_repo.working_tree_dir, "--fetch-timeout", "0"]) == 1
        assert capsys.readouterr().out == ""

    def test_version(self, capsys):
        """Test --version prints the program name."""
        assert main(["--version"]) == 0
        assert "git-version-report" in capsys.readouterr().out


class TestMainPaths:
    """Test path validation through main()."""

    def test_missing_directory(self, temp_dir, capsys):
        """Test a nonexistent directory."""
        assert main([str(temp_dir / "missing")]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "does not exist" in err

    def test_not_a_repository(self, temp_dir, capsys):
        """Test a directory outside git."""
        plain = temp_dir / "plain"
        plain.mkdir()
        assert main([str(plain)]) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "is not a git repository" in err


class TestMainReport:
    """Test full runs through main()."""

    def test_repository_without_remotes(self, git_repo, capsys):
        """Test missing upstream and origin still exit 0."""
        assert main([git_repo.working_tree_dir]) == 0
        out, _ = capsys.readouterr()
        assert "Upstream:      Not configured [main]" in out
        assert "Origin:        Not configured [main]" in out
        assert git_repo.working_tree_dir in out

    def test_missing_upstream_branch(self, git_repo_with_remotes, capsys):
        """Test --upstream-branch develop without such a branch upstream."""
        assert main([git_repo_with_remotes.working_tree_dir, "--upstream-branch", "develop"]) == 0
        out, _ = capsys.readouterr()
        assert "Branch not found [develop]" in out

    def test_scenario_origin_synced_upstream_differs(self, git_repo_upstream_differs, capsys):
        """Test the status lines when only origin has the latest commit."""
        assert main([git_repo_upstream_differs.working_tree_dir]) == 0
        out, _ = capsys.readouterr()
        assert "Local differs from upstream" in out
        assert "Synced (up to date with origin)" in out

    def test_verbose_shows_hashes(self, git_repo_with_remotes, capsys):
        """Test verbose output includes the short commit hash."""
        short = git_repo_with_remotes.head.commit.hexsha[:8]
        assert main([git_repo_with_remotes.working_tree_dir, "-v"]) == 0
        assert f"({short})" in capsys.readouterr().out

    def test_debug_shows_service_logs(self, git_repo, capsys):
        """Test --debug lets DEBUG records from the git services through."""
        assert main([git_repo.working_tree_dir, "--debug"]) == 0
        out, err = capsys.readouterr()
        assert "services.git.remotes" in err
        assert "Remote 'upstream' is not configured" in err
        assert "services.git.local_state" in err
        assert "is not configured" not in out


class TestGetLogger:
    """Test logger naming."""

    def test_package_prefix_is_stripped(self):
        logger = get_logger("git_version_report.core.version_reporter")
        assert logger.name == "core.version_reporter"

    def test_services_stay_outside_gitpython_namespace(self):
        """Test service loggers are not children of the "git" logger."""
        logger = get_logger("git_version_report.services.git.remotes")
        assert logger.name == "services.git.remotes"
        assert not logger.name.startswith("git.")
