"""Encode tables to JSON and decode them back.

A table is represented in JSON as an array of rows,
each row being an array of strings::

    [["a", "b", "c"], ["e", "f", "g"]]

>>> from gridtable import DataTable
>>> table = DataTable.from_rows([["a", "b"], ["c", "d"]])
>>> dumps(table)
'[["a", "b"], ["c", "d"]]'
>>> loads('[["a", "b"], ["c", "d"]]') == table
True

The number of columns is inferred from the first row, an empty
array has no rows to infer it from, so the number of columns
must be provided to decode empty tables preserving their shape:

>>> loads("[]", col_count=3)
DataTable(rows=0, cols=3)
"""

import json
import logging
from typing import IO, Any

from ..errors import InvalidArgument
from ..table import BaseTable, DataTable

logger = logging.getLogger(__name__)


def dumps(table: BaseTable, **kwargs: Any) -> str:
    """Encode a table to a JSON string.

    :param table: The table to encode.
    :param kwargs: Options forwarded to :func:`json.dumps`, like ``indent``.
    """
    return json.dumps(table.to_rows(), **kwargs)


def dump(table: BaseTable, fp: IO[str], **kwargs: Any) -> None:
    """Encode a table as JSON into a file object."""
    json.dump(table.to_rows(), fp, **kwargs)


def loads(text: str | bytes, col_count: int | None = None) -> DataTable:
    """Decode a table from a JSON string.

    :param text: The JSON document, an array of arrays of strings.
    :param col_count: The number of columns of the table, only required
                      when the document might contain no rows.
    :raises InvalidArgument: if the document is not an array of arrays of strings.
    :raises ColumnCountMismatch: if the rows don't all have the same length.
    """
    return decode(json.loads(text), col_count=col_count)


def load(fp: IO[str], col_count: int | None = None) -> DataTable:
    """Decode a table from a file object containing JSON."""
    return decode(json.load(fp), col_count=col_count)


def decode(rows: Any, col_count: int | None = None) -> DataTable:
    """Build a table from already parsed JSON data."""
    if not isinstance(rows, list):
        raise InvalidArgument(f"Expected an array of rows, got {type(rows).__name__}")
    for x, row in enumerate(rows):
        if not isinstance(row, list) or not all(isinstance(v, str) for v in row):
            raise InvalidArgument(f"Row {x} is not an array of strings")
    table = DataTable.from_rows(rows, col_count=col_count)
    logger.debug(
        "Decoded JSON table of %d rows, %d columns", table.row_count, table.col_count
    )
    return table
