"""Command-line argument parsing for git-version-report."""

import argparse
import sys
from typing import List, Optional, Sequence

from git_version_report.constants import DEFAULT_UPSTREAM_BRANCH
from git_version_report.exceptions import UsageError

PROG = "git-version-report"
HELP_FLAGS = ("-h", "--help")

EPILOG = f"""\
arguments:
  PATH                  Path to git repository (default: current directory)

examples:
  {PROG}                          # Check current directory
  {PROG} /path/to/repo            # Check specific repository
  {PROG} . -u develop             # Use 'develop' as upstream branch
  {PROG} /path/to/repo --verbose  # Show commit hashes for specific repo
  {PROG} --all                    # Show all remotes (not just origin/upstream)
  {PROG} -a -v                    # Show all remotes with verbose output
"""


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    """Build the argument parser (PATH is handled separately)."""
    parser = ArgumentParser(
        prog=PROG,
        usage="%(prog)s [PATH] [OPTIONS]",
        description="Display version information for a git repository including "
        "local, origin, upstream and worktree states.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-u",
        "--upstream-branch",
        metavar="BRANCH",
        default=DEFAULT_UPSTREAM_BRANCH,
        help=f"Set upstream branch name (default: {DEFAULT_UPSTREAM_BRANCH})",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_all_remotes",
        action="store_true",
        help="Show all remotes (not just origin and upstream)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output with commit hashes"
    )
    parser.add_argument(
        "--fetch-timeout",
        type=float,
        metavar="SECONDS",
        help="Give up on a remote whose fetch takes longer than this",
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for worktree inspection (default: auto-detect)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Inspect worktrees one at a time (disable parallelism)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    return parser


def wants_help(argv: Sequence[str]) -> bool:
    """Help wins over every other argument, valid or not."""
    return any(arg in HELP_FLAGS for arg in argv)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Only the first token may be the repository PATH, and only when it does
    not look like an option.

    Raises:
        UsageError: unknown option, stray argument or missing option value
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    path = "."
    if argv and not argv[0].startswith("-"):
        path, argv = argv[0], argv[1:]

    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise UsageError(f"Unknown option '{unknown[0]}'")

    args.path = path
    return args
