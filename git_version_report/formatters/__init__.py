"""Formatting utilities for git-version-report.

This package turns a gathered Report into text, organized into modules:
- status: Status words, placeholders and remote status lines
- table: Column width calculation and aligned tables
- report: The full concise and verbose report layouts
"""

# Status formatters
from .status import (
    format_sync_status,
    format_working_tree_status,
    format_lock_state,
    format_remote_placeholder,
    format_remote_status_line,
    short_hash,
)

# Table formatters
from .table import compute_column_widths, format_table, pad_cell

# Report layout
from .report import render_report

__all__ = [
    # Status
    "format_sync_status",
    "format_working_tree_status",
    "format_lock_state",
    "format_remote_placeholder",
    "format_remote_status_line",
    "short_hash",
    # Table
    "compute_column_widths",
    "format_table",
    "pad_cell",
    # Report
    "render_report",
]
