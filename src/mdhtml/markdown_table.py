"""
Helpers for GFM tables.

A table starts at a line containing `|` that is immediately followed by a
separator line containing both `|` and `-`.  The separator line decides the
alignment of each column.
"""

from enum import Enum
from typing import List


class TableAlignment(Enum):
    """Column alignment, valued by its CSS `text-align` value."""
    NONE = ""
    CENTER = "center"
    RIGHT = "right"


def parse_table_row(row: str) -> List[str]:
    """
    Split a table row into trimmed cell contents.

    Only the empty cells produced by the outer `|` delimiters are dropped, so
    empty cells in the middle of a row keep their column.

    Args:
        row: A table row, e.g. "| A | B |"

    Returns:
        List of cell contents
    """
    cells = [cell.strip() for cell in row.split('|')]
    if cells and not cells[0]:
        cells = cells[1:]

    if cells and not cells[-1]:
        cells = cells[:-1]

    return cells


def parse_table_alignments(separator: str) -> List[TableAlignment]:
    """
    Parse alignment markers from a table separator row.

    A cell with a leading and a trailing `:` is centred, a cell with only a
    trailing `:` is right aligned.  Anything else, including a leading `:` on its
    own, has no explicit alignment.

    Args:
        separator: The separator row, e.g. "|:---|:---:|---:|"

    Returns:
        List of alignments, one per column
    """
    alignments = []
    for cell in parse_table_row(separator):
        if cell.startswith(':') and cell.endswith(':'):
            alignments.append(TableAlignment.CENTER)

        elif cell.endswith(':'):
            alignments.append(TableAlignment.RIGHT)

        else:
            alignments.append(TableAlignment.NONE)

    return alignments


def is_table_start(lines: List[str], index: int) -> bool:
    """
    Check whether a table header/separator pair starts at the given line.

    Args:
        lines: All source lines
        index: Index of the candidate header line

    Returns:
        True if lines[index] is a header row followed by a separator row
    """
    if index + 1 >= len(lines):
        return False

    separator = lines[index + 1]
    return '|' in lines[index] and '|' in separator and '-' in separator


def is_table_body_row(line: str) -> bool:
    """Body rows continue until a line without `|`."""
    return '|' in line
