"""Format a table into text for print.

The ``tabulate`` function takes a table and formats it into a text table.
Columns have no names, so the header reports the column indexes.
It will truncate long strings and limit the number of rows to display.
The function is used by the ``gridtable-query`` command to display results.

Example:

    >>> from gridtable import DataTable
    >>> table = DataTable.from_rows([
    ...     ["Videogame", "8", "66.50"],
    ...     ["Laptop", "8", "38.72"],
    ...     ["Laptop", "7", "77.46"],
    ... ])
    >>> print(tabulate(table, max_rows=2))
    0         | 1 | 2
    --------- | - | -----
    Videogame | 8 | 66.50
    Laptop    | 8 | 38.72
    ... and 1 more rows
"""

from ..table import BaseTable


def tabulate(table: BaseTable, max_rows: int = 20) -> str:
    """Format a table into a text table.

    Will produce a string like::

        0         | 1 | 2
        --------- | - | -----
        Videogame | 8 | 66.50
        Laptop    | 8 | 38.72
    """
    max_rows = max(max_rows, 0)
    cols = [str(y) for y in range(table.col_count)]
    rows = [
        [format_value(v) for v in table.get_row(x)]
        for x in range(min(max_rows, table.row_count))
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    text = "\n".join(header + separator + textrows)
    if table.row_count > max_rows:
        text += f"\n... and {table.row_count - max_rows} more rows"
    return text


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    ).rstrip()


def format_value(v: str) -> str:
    """Format a value to be printed in the table.

    Long strings are truncated and newlines
    are escaped to keep each row on a single line.
    """
    v = v.replace("\n", "\\n")
    if len(v) > 30:
        v = v[:27] + "..."
    return v
