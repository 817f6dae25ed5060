"""Alpha Vantage monthly adjusted series and aggregated results."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _strings(data: Any, keys: dict[str, str]) -> dict[str, str]:
    data = data or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    values = {name: data.get(key) or "" for name, key in keys.items()}
    for name, value in values.items():
        if not isinstance(value, str):
            raise ValueError(f"field {keys[name]!r}: expected a string")
    return values


@dataclass
class MetaData:
    information: str = ""
    symbol: str = ""
    last_refreshed: str = ""
    time_zone: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetaData:
        return cls(**_strings(data, {
            "information": "1. Information",
            "symbol": "2. Symbol",
            "last_refreshed": "3. Last Refreshed",
            "time_zone": "4. Time Zone",
        }))


@dataclass
class MonthlyAdjustedTimeSeries:
    """One month of prices, kept as the strings the API sends."""

    open: str = ""
    high: str = ""
    low: str = ""
    close: str = ""
    adjusted_close: str = ""
    volume: str = ""
    dividend_amount: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MonthlyAdjustedTimeSeries:
        return cls(**_strings(data, {
            "open": "1. open",
            "high": "2. high",
            "low": "3. low",
            "close": "4. close",
            "adjusted_close": "5. adjusted close",
            "volume": "6. volume",
            "dividend_amount": "7. dividend amount",
        }))


@dataclass
class Stock:
    meta_data: MetaData = field(default_factory=MetaData)
    month_time_series: dict[str, MonthlyAdjustedTimeSeries] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stock:
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        series = data.get("Monthly Adjusted Time Series") or {}
        if not isinstance(series, Mapping):
            raise ValueError(f"expected an object, got {type(series).__name__}")
        return cls(
            MetaData.from_dict(data.get("Meta Data")),
            {date: MonthlyAdjustedTimeSeries.from_dict(entry) for date, entry in series.items()},
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> Stock:
        """Parse a JSON response; raises ValueError when it is not valid."""
        return cls.from_dict(json.loads(text))


@dataclass
class AggStockData:
    stock: str = ""
    max_stock_price: float | None = None
    actual_price: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "Stock": self.stock,
            "MaxStockPrice": self.max_stock_price,
            "ActualPrice": self.actual_price,
        }