"""Base class and read contract shared by every table.

A table is a grid of textual values organised in rows
and columns. Rows are stored in row-major order, each row being
an immutable tuple of strings, so a value never changes once
it has been appended. Structural edits only add or remove
whole rows or whole columns.

Two kinds of tables exist:

* :class:`gridtable.table.datatable.DataTable` owns its storage.
* :class:`gridtable.table.view.TableView` is a window over the
  storage of a ``DataTable``, produced by :meth:`BaseTable.slice`.

Both expose the same operations, defined here in terms
of a few storage primitives that each subclass implements::

    _row(x)              -> the row tuple at index x
    _insert_row(x, row)  -> store a row tuple at index x
    _delete_row(x)       -> drop the row at index x
    _delete_column(y)    -> drop column y from every row

Everything else (bounds checking, traversal, projection,
merging) is implemented once on top of those primitives.

>>> from gridtable import DataTable
>>> table = DataTable.from_rows([["a", "b", "c"], ["e", "f", "g"]])
>>> table.get_column(1)
['b', 'f']
>>> table.project(2, 0).to_rows()
[['c', 'a'], ['g', 'e']]
"""

import abc
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping, Sequence

from ..errors import (
    ColumnCountMismatch,
    IndexOutOfRange,
    InvalidArgument,
    LastColumnRemoval,
)

if TYPE_CHECKING:
    from .datatable import DataTable
    from .view import TableView

Row = tuple[str, ...]


class BaseTable(abc.ABC):
    """An in-memory relational table of strings.

    Subclasses provide the storage, this class provides
    the operations that can be performed on a table.
    """

    @property
    @abc.abstractmethod
    def row_count(self) -> int:
        """Number of rows currently in the table."""
        ...

    @property
    @abc.abstractmethod
    def col_count(self) -> int:
        """Number of columns of every row in the table."""
        ...

    @abc.abstractmethod
    def _row(self, x: int) -> Row:
        """Return the stored row at index x, without bounds checking."""
        ...

    @abc.abstractmethod
    def _insert_row(self, x: int, row: Row) -> None:
        """Store a row at index x, with x in ``[0, row_count]``."""
        ...

    @abc.abstractmethod
    def _delete_row(self, x: int) -> None:
        """Drop the row at index x, shifting the following rows up."""
        ...

    @abc.abstractmethod
    def _delete_column(self, y: int) -> None:
        """Drop column y from every row, shifting the following columns left."""
        ...

    @abc.abstractmethod
    def _view(self, start: int, stop: int) -> "TableView":
        """Make a view over the rows ``[start, stop)`` of this table."""
        ...

    def append_row(self, values: Sequence[str]) -> None:
        """Append a new row at the bottom of the table.

        The values are copied, so changes to ``values``
        after the call do not affect the table.

        :param values: The values of the row, one per column.
        :raises ColumnCountMismatch: if the row has the wrong number of values,
                                     the table is left unchanged.
        """
        row = tuple(values)
        if self.col_count == 0 or len(row) != self.col_count:
            raise ColumnCountMismatch(
                f"Expected {self.col_count} columns, got {len(row)}"
            )
        self._insert_row(self.row_count, row)

    def get(self, x: int, y: int) -> str:
        """Get the value at row x and column y."""
        self._check_row_index(x)
        self._check_column_index(y)
        return self._row(x)[y]

    def get_row(self, x: int) -> list[str]:
        """Get a copy of the row at index x."""
        self._check_row_index(x)
        return list(self._row(x))

    def get_column(self, y: int) -> list[str]:
        """Get a copy of the column at index y."""
        self._check_column_index(y)
        return [self._row(x)[y] for x in range(self.row_count)]

    def remove_row(self, x: int) -> None:
        """Delete the row at index x.

        The rows after x are shifted up by one position.
        """
        self._check_row_index(x)
        self._delete_row(x)

    def remove_column(self, y: int) -> None:
        """Delete the column at index y from every row.

        The columns after y are shifted left by one position.
        A table must always retain at least one column,
        so removing the last one is refused.

        :raises LastColumnRemoval: if y is the only column left.
        :raises IndexOutOfRange: if y is not a column of the table.
        """
        if self.col_count == 1:
            raise LastColumnRemoval("Refuse to remove the last column")
        self._check_column_index(y)
        self._delete_column(y)

    def apply_column(self, y: int, fn: Callable[[int, str], Any]) -> None:
        """Call ``fn(row_index, value)`` for every value in column y.

        Values are visited from the first to the last row.
        If ``fn`` raises an exception the iteration stops
        immediately and the exception is propagated.

        >>> from gridtable import DataTable
        >>> table = DataTable.from_rows([["a", "1"], ["b", "2"]])
        >>> seen = []
        >>> table.apply_column(0, lambda x, v: seen.append(f"{x}:{v}"))
        >>> seen
        ['0:a', '1:b']
        """
        self._check_column_index(y)
        for x in range(self.row_count):
            fn(x, self._row(x)[y])

    def apply_columns(self, fn: Callable[[int, list[str]], Any], *ys: int) -> None:
        """Call ``fn(row_index, values)`` for every row, projected on columns ys.

        ``values`` contains the values of the columns in the order
        they were provided in ``ys``, not in the order they appear
        in the table, so this can be used to reorder columns.
        Like :meth:`apply_column` the first exception raised by
        ``fn`` stops the iteration and is propagated.
        """
        for y in ys:
            self._check_column_index(y)
        for x in range(self.row_count):
            row = self._row(x)
            fn(x, [row[y] for y in ys])

    def slice(self, start: int, count: int) -> "TableView":
        """Take a contiguous subset of at most ``count`` rows, starting at ``start``.

        Differently from :meth:`project` the returned table
        is a :class:`gridtable.table.view.TableView` that shares
        the rows of this table: changes to one are visible
        through the other. Refer to the ``TableView``
        documentation for the exact sharing rules.

        If fewer than ``count`` rows are available after ``start``
        the view is truncated to the available rows.

        :param start: Index of the first row of the view.
        :param count: Maximum number of rows in the view.
        :raises IndexOutOfRange: if start is not a row of the table.
        :raises InvalidArgument: if count is negative.
        """
        self._check_row_index(start)
        if count < 0:
            raise InvalidArgument(f"Slice length must not be negative, got {count}")
        stop = min(start + count, self.row_count)
        return self._view(start, stop)

    def project(self, *ys: int) -> "DataTable":
        """Create a new table with only the columns ys, in the given order.

        The new table owns its storage and is independent
        from this one. Columns can be repeated.

        :raises IndexOutOfRange: if any of ys is not a column of the table.
        :raises InvalidArgument: if no column was requested.
        """
        from .datatable import DataTable

        if not ys:
            raise InvalidArgument("Project requires at least one column")
        for y in ys:
            self._check_column_index(y)

        projected = DataTable(len(ys))
        for x in range(self.row_count):
            row = self._row(x)
            newrow = tuple(row[y] for y in ys)
            assert len(newrow) == projected.col_count, "Row data corrupted"
            projected._insert_row(x, newrow)
        return projected

    def merge(self, other: "BaseTable", column_map: Mapping[int, int]) -> None:
        """Append to this table all the rows of ``other``, aligning their columns.

        ``column_map`` maps the column indexes of this table
        to the column indexes of ``other``. For every row of ``other``
        a new row is appended where each mapped column takes the value
        of the corresponding column in ``other`` and all unmapped
        columns are left empty.

        >>> from gridtable import DataTable
        >>> people = DataTable.from_rows([["Alice", "30", "Rome"]])
        >>> people.merge(DataTable.from_rows([["Milan", "Bob"]]), {0: 1, 2: 0})
        >>> people.to_rows()
        [['Alice', '30', 'Rome'], ['Bob', '', 'Milan']]

        :raises IndexOutOfRange: if the map references columns that
                                 don't exist, nothing is appended in such case.
        """
        for dest, source in column_map.items():
            self._check_column_index(dest)
            other._check_column_index(source)

        # Take the rows first, other might be this table itself.
        rows = [other._row(x) for x in range(other.row_count)]
        for row in rows:
            newrow = tuple(
                row[column_map[y]] if y in column_map else ""
                for y in range(self.col_count)
            )
            assert len(newrow) == self.col_count, "Row data corrupted"
            self._insert_row(self.row_count, newrow)

    def to_rows(self) -> list[list[str]]:
        """Copy the content of the table as a list of rows."""
        return [list(self._row(x)) for x in range(self.row_count)]

    def _check_row_index(self, x: int) -> None:
        if not 0 <= x < self.row_count:
            raise IndexOutOfRange(
                f"Row index {x} out of range, table has {self.row_count} rows"
            )

    def _check_column_index(self, y: int) -> None:
        if not 0 <= y < self.col_count:
            raise IndexOutOfRange(
                f"Column index {y} out of range, table has {self.col_count} columns"
            )

    def __len__(self) -> int:
        return self.row_count

    def __iter__(self) -> Iterator[list[str]]:
        for x in range(self.row_count):
            yield list(self._row(x))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseTable):
            return NotImplemented
        if (self.row_count, self.col_count) != (other.row_count, other.col_count):
            return False
        return all(self._row(x) == other._row(x) for x in range(self.row_count))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rows={self.row_count}, cols={self.col_count})"
