"""Counting of served HTTP requests by method, route and status code."""

from __future__ import annotations

import threading
from collections import Counter

from flask import Flask, Response, request


class RequestCounter:
    """Thread-safe count of requests keyed by (method, route, status code)."""

    name = "api_request_count"
    description = "Counts the number of HTTP requests"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Counter[tuple[str, str, str]] = Counter()

    def add(self, method: str, route: str, status_code: int | str) -> None:
        with self._lock:
            self._counts[(method, route, str(status_code))] += 1

    def count(self, method: str, route: str, status_code: int | str) -> int:
        with self._lock:
            return self._counts[(method, route, str(status_code))]

    def snapshot(self) -> dict[tuple[str, str, str], int]:
        with self._lock:
            return dict(self._counts)

    def install(self, app: Flask) -> Flask:
        """Count every response; unmatched routes count with an empty route."""

        @app.after_request
        def _record(response: Response) -> Response:
            rule = request.url_rule
            self.add(request.method, rule.rule if rule else "", response.status_code)
            return response

        return app