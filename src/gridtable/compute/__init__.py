"""The gridtable join engine.

Joins take two tables and produce a new one whose
rows contain the fields of both tables::

    [left table fields ... right table fields ...]

Each join algorithm is a :class:`JoinNode` in charge
of generating the joined rows, which are then collected
in a new :class:`gridtable.DataTable` by a producer/consumer
pipeline. The node documents how the rows are generated,
this keeps the behavior near to the node and makes it easy
to know how a join is actually executed:

>>> from gridtable import DataTable
>>> from gridtable.compute import NestedLoopJoinNode
>>> orders = DataTable.from_rows([["1", "Laptop"], ["2", "Car"], ["1", "TV"]])
>>> customers = DataTable.from_rows([["1", "Alice"], ["2", "Bob"]])
>>> node = NestedLoopJoinNode(orders, customers, lambda o, c: o[0] == c[0])
>>> node.execute().to_rows()
[['1', 'Laptop', '1', 'Alice'], ['2', 'Car', '2', 'Bob'], ['1', 'TV', '1', 'Alice']]
"""

from .base import JoinNode
from .join import (
    HashJoinNode,
    LeftOuterJoinNode,
    NestedLoopJoinNode,
    hash_join,
    join,
    left_join,
)

__all__ = (
    "JoinNode",
    "NestedLoopJoinNode",
    "LeftOuterJoinNode",
    "HashJoinNode",
    "join",
    "left_join",
    "hash_join",
)
