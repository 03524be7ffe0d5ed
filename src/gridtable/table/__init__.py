"""The gridtable storage model.

Tables are grids of strings stored row by row.
:class:`DataTable` owns its rows, while :class:`TableView`
is a window over the rows of another table created by slicing.
Both implement the operations defined by :class:`BaseTable`.
"""

from .base import BaseTable
from .datatable import DataTable
from .view import TableView

__all__ = ("BaseTable", "DataTable", "TableView")
