"""Command line interface for running table operations on CSV files.

The command loads a CSV file into a :class:`gridtable.DataTable`,
optionally joins it with a second CSV file, projects and slices
the result, and prints it in the requested format.

The operations are applied in the order join, project, slice
and the output is printed using :mod:`gridtable.utils.tabulate`
or one of the :mod:`gridtable.codecs`.
"""

import argparse
import csv
import logging
import sys

from gridtable import TableError, hash_join, join, left_join
from gridtable.codecs import csvcodec, jsoncodec
from gridtable.table import BaseTable
from gridtable.utils import tabulate

logger = logging.getLogger(__name__)


def parse_columns(value: str) -> list[int]:
    """Parse a comma separated list of column indexes like ``0,2``."""
    try:
        return [int(y) for y in value.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid column list: {value!r}")


def parse_slice(value: str) -> tuple[int, int]:
    """Parse a ``START:COUNT`` slice specification."""
    try:
        start, count = value.split(":", 1)
        return int(start), int(count)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid slice, expected START:COUNT: {value!r}")


def parse_join_columns(value: str) -> tuple[int, int]:
    """Parse a ``LEFT=RIGHT`` pair of join columns."""
    try:
        left, right = value.split("=", 1)
        return int(left), int(right)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid join columns, expected L=R: {value!r}")


def parse_max_rows(value: str) -> int:
    """Parse a number of rows, which can't be negative."""
    try:
        rows = int(value)
    except ValueError:
        rows = -1
    if rows < 0:
        raise argparse.ArgumentTypeError(f"invalid number of rows: {value!r}")
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridtable-query", description="Run table operations on CSV files."
    )
    parser.add_argument("file", help="The CSV file to load.")
    parser.add_argument(
        "--join", metavar="FILE", help="A second CSV file to join with the first one."
    )
    parser.add_argument(
        "--on",
        type=parse_join_columns,
        default=(0, 0),
        metavar="L=R",
        help="The columns of the two files that must be equal. Default 0=0.",
    )
    parser.add_argument(
        "--how",
        choices=("inner", "left", "hash"),
        default="hash",
        help="The join algorithm to use.",
    )
    parser.add_argument(
        "--project", type=parse_columns, metavar="Y1,Y2,...", help="Columns to keep."
    )
    parser.add_argument(
        "--slice", type=parse_slice, metavar="START:COUNT", help="Rows to keep."
    )
    parser.add_argument(
        "--format", choices=("table", "csv", "json"), default="table", help="Output format."
    )
    parser.add_argument(
        "--max-rows",
        type=parse_max_rows,
        default=20,
        help="Rows to display in table format.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase logging verbosity."
    )
    return parser


def run(args: argparse.Namespace) -> BaseTable:
    """Load the files and apply the requested operations."""
    table: BaseTable = csvcodec.load_csv(args.file)
    logger.info("Loaded %s: %d rows, %d columns", args.file, table.row_count, table.col_count)

    if args.join:
        other = csvcodec.load_csv(args.join)
        ly, ry = args.on
        # Validate the columns upfront, predicates would fail mid-join.
        table.get_column(ly)
        other.get_column(ry)
        if args.how == "hash":
            table = hash_join(table, other, lambda r: r[ly], lambda r: r[ry])
        else:
            joiner = left_join if args.how == "left" else join
            table = joiner(table, other, lambda l, r: l[ly] == r[ry])
        logger.info("Joined with %s: %d rows", args.join, table.row_count)

    if args.project:
        table = table.project(*args.project)
    if args.slice:
        table = table.slice(*args.slice)
    return table


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and execute the operations."""
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = run(args)
    except (TableError, OSError, UnicodeDecodeError, csv.Error) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "csv":
        csvcodec.write_csv(result, sys.stdout)
    elif args.format == "json":
        print(jsoncodec.dumps(result))
    else:
        print(tabulate.tabulate(result, max_rows=args.max_rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
