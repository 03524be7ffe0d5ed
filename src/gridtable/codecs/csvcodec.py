"""Read and write tables in CSV format.

Each row of the table becomes a line of the CSV file.
Values containing separators, quotes or newlines are quoted
following the standard CSV rules. Columns at this level
have no names, so no header line is written or expected.

>>> from gridtable import DataTable
>>> table = DataTable.from_rows([["a", "b,c"], ["e", "f"]])
>>> print(to_csv_string(table), end="")
a,"b,c"
e,f
>>> from_csv_string(to_csv_string(table)) == table
True

A CSV file doesn't record how many columns it has, so
the number of columns is the number of fields of the first
line, and reading a file without any line is an error.
"""

import csv
import io
import logging
import os
from typing import IO, Any

from ..errors import ColumnCountMismatch, EmptySource
from ..table import BaseTable, DataTable

logger = logging.getLogger(__name__)

DEFAULT_LINETERMINATOR = "\n"


def write_csv(table: BaseTable, fileobj: IO[str], **fmtparams: Any) -> None:
    """Write the rows of a table to a text file object.

    :param table: The table to write.
    :param fileobj: Where to write, should be opened with ``newline=""``.
    :param fmtparams: Formatting options for :func:`csv.writer`,
                      lines are terminated by ``\\n`` unless
                      ``lineterminator`` is provided.
    """
    fmtparams.setdefault("lineterminator", DEFAULT_LINETERMINATOR)
    writer = csv.writer(fileobj, **fmtparams)
    writer.writerows(table)


def read_csv(fileobj: IO[str], **fmtparams: Any) -> DataTable:
    """Read all the lines of a text file object into a new table.

    Empty lines are ignored.

    :param fileobj: Where to read from, should be opened with ``newline=""``.
    :param fmtparams: Formatting options for :func:`csv.reader`.
    :raises EmptySource: if there are no lines to read.
    :raises ColumnCountMismatch: if a line has a different number
                                 of fields than the first one.
    """
    reader = csv.reader(fileobj, **fmtparams)
    table = None
    for row in reader:
        if not row:
            continue
        if table is None:
            table = DataTable(len(row))
        elif len(row) != table.col_count:
            raise ColumnCountMismatch(
                f"Line {reader.line_num} has {len(row)} fields, expected {table.col_count}"
            )
        table.append_row(row)

    if table is None:
        raise EmptySource("CSV file is empty")
    logger.debug(
        "Read CSV table of %d rows, %d columns", table.row_count, table.col_count
    )
    return table


def save_csv(table: BaseTable, filename: str | os.PathLike, **fmtparams: Any) -> None:
    """Write the rows of a table to a local CSV file."""
    with open(filename, "w", newline="") as f:
        write_csv(table, f, **fmtparams)


def load_csv(filename: str | os.PathLike, **fmtparams: Any) -> DataTable:
    """Read a local CSV file into a new table."""
    with open(filename, newline="") as f:
        return read_csv(f, **fmtparams)


def to_csv_string(table: BaseTable, **fmtparams: Any) -> str:
    """Encode a table to a CSV string."""
    buffer = io.StringIO()
    write_csv(table, buffer, **fmtparams)
    return buffer.getvalue()


def from_csv_string(text: str, **fmtparams: Any) -> DataTable:
    """Decode a table from a CSV string."""
    return read_csv(io.StringIO(text, newline=""), **fmtparams)
