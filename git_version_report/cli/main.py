"""Command-line entry point for git-version-report"""

import sys
from typing import List, Optional

from rich.console import Console

from git_version_report.__version__ import __version__
from git_version_report.cli.args import PROG, build_parser, parse_args, wants_help
from git_version_report.config import Config
from git_version_report.core import VersionReporter
from git_version_report.exceptions import PathError, UsageError
from git_version_report.utils.logging import setup_logging

console = Console()
err_console = Console(stderr=True)


def _print_error(message: str) -> None:
    err_console.print(
        f"Error: {message}", style="red", markup=False, highlight=False, soft_wrap=True
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application.

    Returns:
        Process exit code: 0 when a report (or help) was printed, 1 otherwise
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    debug = "--debug" in argv

    try:
        # Check for help first, before any other processing
        if wants_help(argv):
            build_parser().print_help()
            return 0

        parsed_args = parse_args(argv)

        if parsed_args.version:
            console.print(f"{PROG} {__version__}", markup=False, highlight=False)
            return 0

        setup_logging(debug=parsed_args.debug)

        try:
            config = Config(
                repo_path=parsed_args.path,
                upstream_branch=parsed_args.upstream_branch,
                verbose=parsed_args.verbose,
                show_all_remotes=parsed_args.show_all_remotes,
                debug=parsed_args.debug,
                fetch_timeout=parsed_args.fetch_timeout,
                sequential=parsed_args.sequential,
                workers=parsed_args.workers,
            )
        except ValueError as e:
            raise UsageError(str(e)) from e

        if config.debug:
            err_console.print("[yellow]Debug mode enabled[/yellow]")
            err_console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                err_console.print(f"  {key}: {value}", markup=False, highlight=False)

        reporter = VersionReporter(config)
        reporter.run()
        return 0
    except UsageError as e:
        _print_error(str(e))
        err_console.print("Use --help for usage information.", markup=False)
        return 1
    except PathError as e:
        _print_error(str(e))
        return 1
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        _print_error(str(e))
        if debug:
            err_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
