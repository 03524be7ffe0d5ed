"""Base classes and interfaces for the join engine.

A join consumes two tables and produces a third one.
Each join algorithm is represented by a node that knows
its two inputs and how to generate the joined rows::

    left  --\\
             JoinNode.rows() --(row)--> pipeline --> DataTable
    right --/

The node itself only generates rows, one at a time,
in the order they are discovered. Turning those rows
into a table is done by :meth:`JoinNode.execute`
through the pipeline in :mod:`gridtable.compute.pipeline`.
"""

import abc
import logging
from typing import Iterator

from ..table import BaseTable, DataTable
from .pipeline import drain, run_pipeline

logger = logging.getLogger(__name__)


class JoinNode(abc.ABC):
    """A relational join between two tables.

    The rows of the result contain all the columns
    of the left table followed by all the columns
    of the right table::

        [left table fields ... right table fields ...]

    Subclasses implement :meth:`rows` to decide which
    pairs of rows have to be joined, for example
    a node that joins every row with every other row
    (a cross join) can be implemented as::

        class CrossJoinNode(JoinNode):
            def rows(self):
                for l in self.left:
                    for r in self.right:
                        yield l + r

            def __str__(self):
                return f"CrossJoinNode({self.left!r}, {self.right!r})"
    """

    def __init__(self, left: BaseTable, right: BaseTable) -> None:
        """
        :param left: The left table of the join.
        :param right: The right table of the join.
        """
        self.left = left
        self.right = right

    @property
    def col_count(self) -> int:
        """The number of columns of the join result."""
        return self.left.col_count + self.right.col_count

    @abc.abstractmethod
    def rows(self) -> Iterator[list[str]]:
        """Emit the joined rows in the order they are discovered."""
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the node."""
        ...

    def execute(self, threaded: bool = True) -> DataTable:
        """Perform the join and collect the result in a new table.

        The result is independent from both the input tables.

        :param threaded: Generate the rows in a producer thread
                         while they are collected, when ``False``
                         rows are generated and collected sequentially.
                         The result is the same in both cases.
        """
        logger.debug("Executing %s", self)
        result = DataTable.from_rows((), col_count=self.col_count)
        collect = run_pipeline if threaded else drain
        collect(self.rows(), result)
        logger.debug("Join produced %d rows", result.row_count)
        return result
