"""Tables that own their storage.

:class:`DataTable` is the table users build: it is created empty
with a fixed number of columns and grows by appending rows.

>>> from gridtable import DataTable
>>> table = DataTable(3)
>>> table.append_row(["a", "b", "c"])
>>> table.append_row(["e", "f", "g"])
>>> table
DataTable(rows=2, cols=3)
>>> table.get(1, 2)
'g'
>>> table.remove_column(1)
>>> table.to_rows()
[['a', 'c'], ['e', 'g']]
"""

from typing import Iterable, Self, Sequence

from ..errors import ColumnCountMismatch, InvalidArgument
from .base import BaseTable, Row
from .view import TableView


class DataTable(BaseTable):
    """An in-memory relational table that owns its rows.

    Values are immutable once appended, so the table
    can only grow or shrink by whole rows or columns.
    Tables derived through :meth:`project`, :meth:`merge`
    or joins are always ``DataTable`` instances independent
    from their sources, while :meth:`slice` returns a
    :class:`gridtable.table.view.TableView` sharing the rows.
    """

    def __init__(self, col_count: int) -> None:
        """
        :param col_count: The number of columns of the table, at least 1.
        """
        if col_count < 1:
            raise InvalidArgument(f"A table needs at least one column, got {col_count}")
        self._rows: list[Row] = []
        self._col_count = col_count

    @classmethod
    def from_rows(
        cls, rows: Iterable[Sequence[str]], col_count: int | None = None
    ) -> Self:
        """Create a table out of a sequence of rows.

        The number of columns is inferred from the first row,
        unless ``col_count`` is provided. Providing it is the only way
        to preserve the shape of a table that has no rows, in which case
        the resulting table has zero columns when it is omitted.

        :param rows: The rows of the table, they will be copied.
        :param col_count: The expected number of columns.
        :raises ColumnCountMismatch: if the rows don't all have the same size.
        """
        stored = [tuple(row) for row in rows]
        if col_count is None:
            col_count = len(stored[0]) if stored else 0
        if col_count < 0 or (stored and col_count == 0):
            raise InvalidArgument(f"Invalid number of columns: {col_count}")
        for x, row in enumerate(stored):
            if len(row) != col_count:
                raise ColumnCountMismatch(
                    f"Row {x} has {len(row)} columns, expected {col_count}"
                )

        # Going through __new__ allows zero columns for empty sources.
        table = cls.__new__(cls)
        table._rows = stored
        table._col_count = col_count
        return table

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def col_count(self) -> int:
        return self._col_count

    def _row(self, x: int) -> Row:
        return self._rows[x]

    def _insert_row(self, x: int, row: Row) -> None:
        self._rows.insert(x, row)

    def _delete_row(self, x: int) -> None:
        del self._rows[x]

    def _delete_column(self, y: int) -> None:
        # Rows are rebuilt in place, so views keep seeing the same storage.
        self._rows[:] = [row[:y] + row[y + 1 :] for row in self._rows]
        self._col_count -= 1

    def _view(self, start: int, stop: int) -> TableView:
        return TableView(self, start, stop)
