"""Conversion of tables to and from external formats.

Three formats are supported, each in its own module:

* :mod:`gridtable.codecs.jsoncodec` an array of rows, each an array of strings.
* :mod:`gridtable.codecs.csvcodec` one line per row, without header.
* :mod:`gridtable.codecs.arrow` interoperability with :mod:`pyarrow`.

All formats preserve the shape of the table and
the position of every value.
"""

from . import arrow, csvcodec, jsoncodec

__all__ = ("arrow", "csvcodec", "jsoncodec")
