"""Column-aligned table formatting."""

from typing import List, Sequence

from rich.cells import cell_len

from git_version_report.constants import COLUMN_SEPARATOR


def pad_cell(text: str, width: int) -> str:
    """Left-align text in a column of ``width`` terminal cells.

    Widths are measured in cells rather than characters so wide symbols
    keep the columns aligned.
    """
    return text + " " * max(0, width - cell_len(text))


def compute_column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[int]:
    """
    Compute the width of every column.

    Each column is as wide as its header or its longest cell, whichever is
    larger, so no value is ever truncated.

    Args:
        headers: Column labels (their length is the minimum width)
        rows: Table cells, one sequence per row

    Returns:
        Width of each column in terminal cells
    """
    widths = [cell_len(header) for header in headers]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], cell_len(cell))
    return widths


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    """
    Format a header, a dashed rule and the rows as aligned lines.

    Args:
        headers: Column labels
        rows: Table cells; every row must have one cell per header

    Returns:
        Table lines without trailing whitespace
    """
    for row in rows:
        if len(row) != len(headers):
            raise ValueError(f"Row has {len(row)} cells, expected {len(headers)}")

    widths = compute_column_widths(headers, rows)

    def join(cells: Sequence[str]) -> str:
        padded = (pad_cell(cell, width) for cell, width in zip(cells, widths))
        return COLUMN_SEPARATOR.join(padded).rstrip()

    lines = [join(headers), join(["-" * width for width in widths])]
    lines.extend(join(row) for row in rows)
    return lines
