"""Exchange tables with Apache Arrow.

Converting a table to a :class:`pyarrow.Table` allows to use
the whole Arrow ecosystem on its data, like writing it to Parquet
files or converting it to a pandas DataFrame, while converting an Arrow
table into a :class:`gridtable.DataTable` allows to use the joins
and structural operations of gridtable on data loaded through Arrow.

Tables only contain strings, so each column becomes
an Arrow ``string`` column. Columns have no names at this level,
so they get named ``f0``, ``f1``, ... unless names are provided:

>>> from gridtable import DataTable
>>> table = DataTable.from_rows([["Flamingo", "2"], ["Horse", "4"]])
>>> to_arrow(table, names=["animals", "n_legs"])
pyarrow.Table
animals: string
n_legs: string
----
animals: [["Flamingo","Horse"]]
n_legs: [["2","4"]]

When importing from Arrow all columns are converted to strings
and null values become empty strings:

>>> import pyarrow as pa
>>> from_arrow(pa.table({"n_legs": [2, None, 100]})).to_rows()
[['2'], [''], ['100']]
"""

import logging

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import ColumnCountMismatch, EmptySource
from ..table import BaseTable, DataTable

logger = logging.getLogger(__name__)


def to_arrow(table: BaseTable, names: list[str] | None = None) -> pa.Table:
    """Convert a table to a :class:`pyarrow.Table` of string columns.

    :param table: The table to convert.
    :param names: The names of the columns, one for each column of the table.
    :raises ColumnCountMismatch: if the number of names doesn't match
                                 the number of columns.
    """
    if names is None:
        names = [f"f{y}" for y in range(table.col_count)]
    if len(names) != table.col_count:
        raise ColumnCountMismatch(
            f"Got {len(names)} names for a table of {table.col_count} columns"
        )
    arrays = [
        pa.array(table.get_column(y), type=pa.string()) for y in range(table.col_count)
    ]
    return pa.Table.from_arrays(arrays, names=names)


def from_arrow(data: pa.Table | pa.RecordBatch) -> DataTable:
    """Convert a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch` to a table.

    :param data: The Arrow data to convert.
    :raises EmptySource: if the data has no columns.
    """
    if data.num_columns == 0:
        raise EmptySource("Arrow data has no columns")

    columns = []
    for column in data.columns:
        strings = pc.fill_null(pc.cast(column, pa.string()), "")
        columns.append(strings.to_pylist())
    logger.debug(
        "Converting Arrow data of %d rows, %d columns", data.num_rows, data.num_columns
    )
    return DataTable.from_rows(zip(*columns), col_count=data.num_columns)
