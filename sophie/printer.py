"""Console output: indented JSON and a table of aggregated stocks."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import Any, TextIO

from sophie.stock import AggStockData


def _encode(value: Any) -> Any:
    if callable(getattr(value, "to_dict", None)):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def stdout_print(value: Any, file: TextIO | None = None) -> None:
    """Print value as JSON indented by two spaces, or an error line."""
    try:
        text = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False, default=_encode)
    except (TypeError, ValueError) as exc:
        text = f"Error marshalling JSON: {exc}"
    print(text, file=file or sys.stdout)


def _price(price: float | None) -> str:
    if price is None:
        return "N/A"
    text = f"{price:.2f}"
    return {"nan": "NaN", "inf": "+Inf", "-inf": "-Inf"}.get(text, text)


def print_agg_stock_data_table(data: Iterable[AggStockData], file: TextIO | None = None) -> None:
    """Print stocks as columns separated by at least two spaces."""
    rows = [("STOCK", "ACTUAL PRICE", "MAX PRICE")]
    rows += [(item.stock, _price(item.actual_price), _price(item.max_stock_price)) for item in data]
    widths = [max(len(row[i]) for row in rows) + 2 for i in range(2)]
    for first, second, third in rows:
        print(first.ljust(widths[0]) + second.ljust(widths[1]) + third, file=file or sys.stdout)