"""Views sharing the storage of another table.

A :class:`TableView` is what :meth:`gridtable.table.base.BaseTable.slice`
returns. Instead of copying the rows it refers to, a view is a window
over the rows of its parent table, so the data is shared
between the two and changes through one are visible through the other.

The sharing rules are:

* The view covers the rows ``[start, stop)`` of the parent,
  both positions are decided when the view is created.
  If the parent shrinks, the view only covers the rows
  that still exist in that range.
* The columns are shared, the view always has the same
  number of columns as its parent.
* Changes to the parent are observed by the view:
  removing a row of the parent before or inside the window
  shifts the rows seen through the view, removing a column
  removes it from the view too. Rows appended to the parent
  after the window are not part of the view.
* Changes to the view are written to the parent:
  appending a row to the view inserts it into the parent
  right after the last row of the window and grows the window.
  This never overwrites a row of the parent, but it does
  make the parent longer. Removing a row of the view removes
  it from the parent and removing a column of the view
  removes it from the whole parent.

>>> from gridtable import DataTable
>>> table = DataTable.from_rows([["a"], ["b"], ["c"]])
>>> view = table.slice(0, 2)
>>> view.append_row(["x"])
>>> view.to_rows()
[['a'], ['b'], ['x']]
>>> table.to_rows()
[['a'], ['b'], ['x'], ['c']]

When the sharing is not wanted, :meth:`TableView.detach`
makes an independent copy of the view.
"""

import logging
from typing import TYPE_CHECKING

from ..errors import IndexOutOfRange
from .base import BaseTable, Row

if TYPE_CHECKING:
    from .datatable import DataTable

logger = logging.getLogger(__name__)


class TableView(BaseTable):
    """A window over a range of rows of a :class:`DataTable`."""

    def __init__(self, parent: "DataTable", start: int, stop: int) -> None:
        """
        :param parent: The table owning the rows.
        :param start: Index of the first row of the window in the parent.
        :param stop: Index after the last row of the window in the parent.
        """
        self._parent = parent
        self._start = start
        self._stop = stop

    @property
    def parent(self) -> "DataTable":
        """The table that owns the rows of this view."""
        return self._parent

    @property
    def start(self) -> int:
        """Index in the parent of the first row of the view."""
        return self._start

    @property
    def row_count(self) -> int:
        return max(0, min(self._stop, self._parent.row_count) - self._start)

    @property
    def col_count(self) -> int:
        return self._parent.col_count

    def detach(self) -> "DataTable":
        """Copy the rows of the view into a new independent table."""
        from .datatable import DataTable

        return DataTable.from_rows(
            (self._row(x) for x in range(self.row_count)), col_count=self.col_count
        )

    def _row(self, x: int) -> Row:
        return self._parent._row(self._start + x)

    def _insert_row(self, x: int, row: Row) -> None:
        if self._start > self._parent.row_count:
            raise IndexOutOfRange(
                f"View starting at row {self._start} is past the end of its parent"
            )
        count = self.row_count
        logger.debug("Writing row through view into parent at %d", self._start + x)
        self._parent._insert_row(self._start + x, row)
        self._stop = self._start + count + 1

    def _delete_row(self, x: int) -> None:
        count = self.row_count
        self._parent._delete_row(self._start + x)
        self._stop = self._start + count - 1

    def _delete_column(self, y: int) -> None:
        self._parent._delete_column(y)

    def _view(self, start: int, stop: int) -> "TableView":
        return TableView(self._parent, self._start + start, self._start + stop)

    def __repr__(self) -> str:
        return (
            f"TableView(rows={self.row_count}, cols={self.col_count}, "
            f"start={self._start})"
        )
