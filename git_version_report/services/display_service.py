"""Display service for version reports"""
from rich.console import Console

from git_version_report.formatters import render_report
from git_version_report.models.report import Report
from git_version_report.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def display_report(self, report: Report) -> None:
        """Print a gathered report to standard output."""
        lines = render_report(report, verbose=self.verbose)
        logger.debug(f"Rendering report with {len(lines)} lines")
        # Branch names and descriptors are data, never rich markup or emoji codes
        console.print(
            "\n".join(lines),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
