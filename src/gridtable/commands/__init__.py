"""Shell commands exposing gridtable functionalities.

gridtable-query
===============

``gridtable-query`` loads CSV files and runs table operations on them::

    gridtable-query orders.csv --join customers.csv --on 1=0 --project 0,3

The result is printed as a text table, or as CSV or JSON with ``--format``.
Use ``-v`` or ``-vv`` to see what the engine is doing.
"""
