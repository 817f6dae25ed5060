"""Aggregation of dividend history into a ceiling price per stock."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from sophie.gateway import AlphavantageGateway, Gateway
from sophie.stock import AggStockData, Stock

YEARS_WINDOW = 6
TARGET_YIELD = 0.06

_YEAR = re.compile(r"[+-]?[0-9]+")


class StockService(ABC):
    """Produces aggregated data for a list of symbols."""

    @abstractmethod
    def get_stock_data(self, symbols: Iterable[str]) -> list[AggStockData]:
        """Return one result per symbol, in the order given."""


def _parse_year(key: str) -> int:
    text = key.split("-")[0]
    if not _YEAR.fullmatch(text):
        raise ValueError(f"invalid year {text!r} in date {key!r}")
    return int(text)


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid number {text!r}")
    return float(text)


def aggregate_dividend_per_year(stock: Stock, current_year: int | None = None) -> AggStockData:
    """Compute the price that yields 6% on the mean dividend of the last six full years.

    Raises ValueError when a date key has no valid year or the latest close is not a number.
    """
    if current_year is None:
        current_year = date.today().year
    first_year = current_year - YEARS_WINDOW

    yearly: defaultdict[int, float] = defaultdict(float)
    for key, entry in stock.month_time_series.items():
        year = _parse_year(key)
        if first_year <= year < current_year:
            try:
                dividend = _parse_float(entry.dividend_amount)
            except ValueError:
                dividend = 0.0
            yearly[year] += dividend

    mean_dividend = sum(yearly.values()) / len(yearly) if yearly else math.nan
    max_price = mean_dividend / TARGET_YIELD

    latest = max(stock.month_time_series, default="")
    latest_entry = stock.month_time_series.get(latest)
    actual_price = _parse_float(latest_entry.close if latest_entry is not None else "")

    return AggStockData(
        stock=stock.meta_data.symbol,
        max_stock_price=max_price,
        actual_price=actual_price,
    )


class AlphavantageService(StockService):
    """Fetches symbols concurrently and aggregates each one."""

    def __init__(self, gateway: Gateway | None = None):
        self.gateway = gateway if gateway is not None else AlphavantageGateway()

    def get_stock_data(self, symbols: Iterable[str]) -> list[AggStockData]:
        symbols = list(symbols)
        if not symbols:
            return []
        with ThreadPoolExecutor(max_workers=len(symbols)) as pool:
            return list(pool.map(self._fetch_one, symbols))

    def _fetch_one(self, symbol: str) -> AggStockData:
        try:
            return aggregate_dividend_per_year(self.gateway.get_data(symbol))
        except Exception as exc:
            print("Error fetching data for symbol:", symbol, "Error:", exc)
            return AggStockData()