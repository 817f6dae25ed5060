"""Command line interface printing a table of stock ceiling prices."""

from __future__ import annotations

import argparse
import csv
from collections.abc import Iterable, Sequence

from sophie.printer import print_agg_stock_data_table
from sophie.service import AlphavantageService, StockService

NO_SYMBOLS_MESSAGE = "You need to pass at least one argument to `--symbols`"


def parse_symbols(values: Iterable[str]) -> list[str]:
    """Split each comma separated value into symbols, in order."""
    return [symbol for value in values if value for symbol in next(csv.reader([value]))]


def main(argv: Sequence[str] | None = None, service: StockService | None = None) -> int:
    """Run the command line; returns the exit status."""
    parser = argparse.ArgumentParser(prog="sophie", description="cli for get stock information")
    get = parser.add_subparsers(dest="command").add_parser("get", help="Get stock data")
    get.add_argument("-s", "--symbols", action="append", default=[],
                     help="List of symbols (ex: BBAS3,ITSA4,PETR4)")
    args = parser.parse_args(argv)
    if args.command != "get":
        parser.print_help()
        return 0

    symbols = parse_symbols(args.symbols)
    if not symbols:
        print(NO_SYMBOLS_MESSAGE)
        return 0

    print_agg_stock_data_table((service or AlphavantageService()).get_stock_data(symbols))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())