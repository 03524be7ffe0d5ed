"""Errors raised by the table layer.

All errors inherit from :class:`TableError` so that callers
can catch any failure coming from gridtable with a single
``except`` clause. Where it makes sense the errors also inherit
from the matching builtin exception, so that code expecting
an ``IndexError`` or a ``ValueError`` keeps working.

>>> from gridtable import DataTable
>>> table = DataTable(2)
>>> table.append_row(["only one"])
Traceback (most recent call last):
    ...
gridtable.errors.ColumnCountMismatch: Expected 2 columns, got 1
"""


class TableError(Exception):
    """Base class for all gridtable errors."""


class ColumnCountMismatch(TableError, ValueError):
    """A row has the wrong number of columns for its table."""


class IndexOutOfRange(TableError, IndexError):
    """A row or column index is outside of the table bounds."""


class InvalidArgument(TableError, ValueError):
    """An argument has an invalid value, like a negative slice length."""


class LastColumnRemoval(TableError):
    """Attempted to remove the only column left in a table."""


class EmptySource(TableError):
    """Decoded a source with no rows where the shape can't be inferred."""
