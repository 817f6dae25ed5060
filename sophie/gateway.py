"""Access to the Alpha Vantage monthly adjusted time series."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from http import HTTPStatus

import requests

from sophie.stock import Stock

BASE_URL = "https://www.alphavantage.co/query"


class GatewayError(Exception):
    """Raised when stock data cannot be fetched or decoded."""


class Gateway(ABC):
    """Source of raw stock data for a symbol."""

    @abstractmethod
    def get_data(self, symbol: str) -> Stock:
        """Return the time series for symbol or raise GatewayError."""


class AlphavantageGateway(Gateway):
    """Fetches monthly adjusted series for symbols on the São Paulo exchange."""

    def __init__(self, session: requests.Session | None = None, api_key: str | None = None):
        self.session = session or requests.Session()
        self.api_key = api_key

    def get_data(self, symbol: str) -> Stock:
        api_key = self.api_key if self.api_key is not None else os.environ.get("API_KEY", "")
        url = f"{BASE_URL}?function=TIME_SERIES_MONTHLY_ADJUSTED&symbol={symbol}.SAO&apikey={api_key}"
        try:
            response = self.session.get(url)
        except requests.RequestException as exc:
            raise GatewayError(str(exc)) from exc

        with response:
            code = response.status_code
            if code != HTTPStatus.OK:
                reason = response.reason
                if not reason and code in HTTPStatus._value2member_map_:
                    reason = HTTPStatus(code).phrase
                raise GatewayError(f"error: {code} {reason or ''}".rstrip())
            try:
                return Stock.from_json(response.content)
            except ValueError as exc:
                raise GatewayError(f"invalid response for {symbol}: {exc}") from exc