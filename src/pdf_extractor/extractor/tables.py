"""Columnar-text heuristic for candidate table rows.

A line counts as a table row when it contains two consecutive spaces or a tab,
the usual trace left by column-aligned text. No column geometry is analysed.
"""

from __future__ import annotations

import re

# Cell separator: any run of 2+ whitespace characters, or a tab
_CELL_SEPARATOR = re.compile(r"\s{2,}|\t")

DEFAULT_MAX_ROWS_PER_PAGE = 5


def is_columnar(line: str) -> bool:
    return "  " in line or "\t" in line


def split_cells(line: str) -> tuple[str, ...]:
    """Split a line into its non-blank cells."""
    return tuple(cell for cell in _CELL_SEPARATOR.split(line) if cell.strip())


def detect_table_rows(
    page_text: str,
    max_rows: int = DEFAULT_MAX_ROWS_PER_PAGE,
) -> list[tuple[str, ...]]:
    """Return candidate table rows for one page of text.

    Only the first *max_rows* columnar lines are considered. Every one of them
    yields a row, so a line made of whitespace alone yields an empty row.

    Args:
        page_text: The page's text runs joined with single spaces.
        max_rows: Cap on columnar lines taken from this page.

    Returns:
        Rows in line order, each a tuple of cell strings.
    """
    candidates = [line for line in page_text.split("\n") if is_columnar(line)]

    return [split_cells(line) for line in candidates[:max_rows]]
