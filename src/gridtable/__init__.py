"""gridtable

An in-memory relational table for lightweight tabular data
manipulation without an external database engine.

A table is a grid of strings organised in rows and columns.
Tables are built by appending rows, and can be queried
and transformed through relational operators:

>>> from gridtable import DataTable, hash_join
>>> table = DataTable(3)
>>> for row in (["a", "b", "c"], ["e", "f", "g"], ["f", "k", "x"], ["g", "h", "l"]):
...     table.append_row(row)
>>> table.project(0, 2).to_rows()
[['a', 'c'], ['e', 'g'], ['f', 'x'], ['g', 'l']]
>>> table.slice(1, 2).to_rows()
[['e', 'f', 'g'], ['f', 'k', 'x']]
>>> other = DataTable.from_rows([["a", "1"], ["f", "2"], ["k", "3"]])
>>> hash_join(table, other, lambda l: l[0], lambda r: r[0]).to_rows()
[['a', 'b', 'c', 'a', '1'], ['f', 'k', 'x', 'f', '2']]

The library is constituted by multiple components,
each isolated within its own package:

* :mod:`gridtable.table` the storage model, owned tables and views.
* :mod:`gridtable.compute` the join engine.
* :mod:`gridtable.codecs` conversion from and to JSON, CSV and Arrow.
"""

from . import codecs, compute, table
from .compute import hash_join, join, left_join
from .errors import (
    ColumnCountMismatch,
    EmptySource,
    IndexOutOfRange,
    InvalidArgument,
    LastColumnRemoval,
    TableError,
)
from .table import BaseTable, DataTable, TableView

__all__ = (
    "codecs",
    "compute",
    "table",
    "BaseTable",
    "DataTable",
    "TableView",
    "join",
    "left_join",
    "hash_join",
    "TableError",
    "ColumnCountMismatch",
    "IndexOutOfRange",
    "InvalidArgument",
    "LastColumnRemoval",
    "EmptySource",
)
