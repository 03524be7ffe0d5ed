"""Join nodes implementing relational joins between tables.

Three join algorithms are provided, all of them produce
rows made of the left row followed by the right row,
and return a new table independent from the inputs.

Nested Loop Join
================

Provided by :class:`NestedLoopJoinNode` (and the :func:`join` shortcut).
Every row of the left table is compared with every row
of the right table, and the pair is joined whenever
a predicate function says they match.
Any condition can be expressed, but the cost grows with
the product of the number of rows of the two tables.

>>> from gridtable import DataTable
>>> left = DataTable.from_rows([["a", "b", "c"], ["e", "f", "g"], ["f", "k", "x"]])
>>> right = DataTable.from_rows([["a", "1"], ["f", "2"], ["k", "3"]])
>>> join(left, right, lambda l, r: l[0] == r[0]).to_rows()
[['a', 'b', 'c', 'a', '1'], ['f', 'k', 'x', 'f', '2']]

Left Outer Join
===============

Provided by :class:`LeftOuterJoinNode` (and the :func:`left_join` shortcut).
Works like the nested loop join, but every row of the left table
is part of the result even when it doesn't match any row
of the right table. In such case the right fields are left empty.

>>> left_join(left, right, lambda l, r: l[0] == r[0]).to_rows()
[['a', 'b', 'c', 'a', '1'], ['e', 'f', 'g', '', ''], ['f', 'k', 'x', 'f', '2']]

Hash Join
=========

Provided by :class:`HashJoinNode` (and the :func:`hash_join` shortcut).
Only supports equality conditions: a key function for each table
computes the value that must be equal for two rows to be joined.
A hash table of keys is built for one of the two tables
and then the rows of the other table look up their key in it.
This is generally much faster than the nested loop join,
but uses more memory due to the temporary hash table.

>>> from operator import itemgetter
>>> hash_join(left, right, itemgetter(0), itemgetter(0)).to_rows()
[['a', 'b', 'c', 'a', '1'], ['f', 'k', 'x', 'f', '2']]
"""

import logging
from typing import Callable, Iterator

from ..table import BaseTable, DataTable
from ..utils.inspect import get_qualname
from .base import JoinNode

logger = logging.getLogger(__name__)

Predicate = Callable[[list[str], list[str]], bool]
KeyFunction = Callable[[list[str]], str]


class NestedLoopJoinNode(JoinNode):
    """Join two tables on an arbitrary condition.

    For each row of the left table, in order, all the rows
    of the right table are scanned in order and the pair
    is emitted when ``predicate(left_row, right_row)`` is true.
    So the result rows are ordered by left row first and
    by right row second. Duplicates are preserved.
    """

    def __init__(self, left: BaseTable, right: BaseTable, predicate: Predicate) -> None:
        """
        :param left: The left table of the join.
        :param right: The right table of the join.
        :param predicate: Function receiving a left row and a right row,
                          returning whether they should be joined.
        """
        super().__init__(left, right)
        self.predicate = predicate

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}(predicate={get_qualname(self.predicate)}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def rows(self) -> Iterator[list[str]]:
        """Compare every pair of rows and emit those that match."""
        for lrow in self.left:
            for rrow in self.right:
                if self.predicate(lrow, rrow):
                    yield lrow + rrow


class LeftOuterJoinNode(NestedLoopJoinNode):
    """Join two tables on an arbitrary condition, keeping all left rows.

    Like :class:`NestedLoopJoinNode`, but when a left row doesn't
    match any row of the right table it is emitted anyway,
    padded with as many empty values as the right table has columns::

        [left table fields ... "", "", ...]
    """

    def rows(self) -> Iterator[list[str]]:
        """Compare every pair of rows and emit those that match or are unmatched."""
        padding = [""] * self.right.col_count
        for lrow in self.left:
            matches = 0
            for rrow in self.right:
                if self.predicate(lrow, rrow):
                    matches += 1
                    yield lrow + rrow
            if matches == 0:
                yield lrow + padding


class HashJoinNode(JoinNode):
    """Join two tables where the keys of the two rows are equal.

    Supposing we have two tables, and we want to join them
    on their first column::

        left:               right:
        +---+---+---+       +---+---+
        | a | b | c |       | a | 1 |
        | e | f | g |       | f | 2 |
        | f | k | x |       | k | 3 |
        | g | h | l |       +---+---+
        +---+---+---+

    The join happens in two phases:

    1. **Build**: the larger of the two tables, ``left`` in this case,
       is scanned once to build a hash table that maps each key
       to the rows that have that key, in the order they appear::

        {"a": [[a, b, c]], "e": [[e, f, g]], "f": [[f, k, x]], "g": [[g, h, l]]}

    2. **Probe**: the smaller table is scanned once, and for each
       of its rows the key is looked up in the hash table.
       A joined row is emitted for every row found under that key::

        [a, 1] -> [[a, b, c]] -> emit [a, b, c, a, 1]
        [f, 2] -> [[f, k, x]] -> emit [f, k, x, f, 2]
        [k, 3] -> not found

    When the two tables have the same number of rows,
    the right table is the one used to build the hash table.
    Whichever table was used for the hash table,
    rows are always emitted as ``left_row + right_row``.

    Note that the hash table holds the larger relation, which takes
    more memory than holding the smaller one. The result is ordered
    by the rows of the probing table, see :attr:`build_side`.
    """

    def __init__(
        self,
        left: BaseTable,
        right: BaseTable,
        left_key: KeyFunction,
        right_key: KeyFunction,
    ) -> None:
        """
        :param left: The left table of the join.
        :param right: The right table of the join.
        :param left_key: Function computing the join key of a left row.
        :param right_key: Function computing the join key of a right row.
        """
        super().__init__(left, right)
        self.left_key = left_key
        self.right_key = right_key

    @property
    def build_side(self) -> str:
        """Which table the hash table is built for, ``"left"`` or ``"right"``."""
        return "left" if self.left.row_count > self.right.row_count else "right"

    def __str__(self) -> str:
        return (
            f"HashJoinNode(left_key={get_qualname(self.left_key)}, "
            f"right_key={get_qualname(self.right_key)}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def rows(self) -> Iterator[list[str]]:
        """Build the hash table for the larger table and probe it with the smaller."""
        build_left = self.build_side == "left"
        if build_left:
            larger, larger_key = self.left, self.left_key
            smaller, smaller_key = self.right, self.right_key
        else:
            larger, larger_key = self.right, self.right_key
            smaller, smaller_key = self.left, self.left_key

        hashtable: dict[str, list[list[str]]] = {}
        for row in larger:
            hashtable.setdefault(larger_key(row), []).append(row)
        logger.debug(
            "Built hash table on %s side: %d rows, %d keys",
            self.build_side,
            larger.row_count,
            len(hashtable),
        )

        for row in smaller:
            for match in hashtable.get(smaller_key(row), ()):
                # Keep the left fields first whatever side was hashed.
                yield match + row if build_left else row + match


def join(
    left: BaseTable, right: BaseTable, predicate: Predicate, threaded: bool = True
) -> DataTable:
    """Join two tables with a nested loop on the given predicate.

    Refer to :class:`NestedLoopJoinNode` for details.
    """
    return NestedLoopJoinNode(left, right, predicate).execute(threaded=threaded)


def left_join(
    left: BaseTable, right: BaseTable, predicate: Predicate, threaded: bool = True
) -> DataTable:
    """Left outer join two tables on the given predicate.

    Refer to :class:`LeftOuterJoinNode` for details.
    """
    return LeftOuterJoinNode(left, right, predicate).execute(threaded=threaded)


def hash_join(
    left: BaseTable,
    right: BaseTable,
    left_key: KeyFunction,
    right_key: KeyFunction,
    threaded: bool = True,
) -> DataTable:
    """Equality join two tables on the keys computed by the two key functions.

    Refer to :class:`HashJoinNode` for details.
    """
    return HashJoinNode(left, right, left_key, right_key).execute(threaded=threaded)
