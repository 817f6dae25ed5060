"""HTTP API serving health checks and aggregated stock data."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from flask import Flask, Response, jsonify, request

from sophie.metrics import RequestCounter
from sophie.service import AlphavantageService, StockService

HOST = "0.0.0.0"
PORT = 8000


def create_app(
    service: StockService | None = None, counter: RequestCounter | None = None
) -> Flask:
    """Build the application with /health and /stocks routes."""
    if service is None:
        service = AlphavantageService()
    if counter is None:
        counter = RequestCounter()

    app = Flask("sophie")
    app.json.sort_keys = False
    app.extensions["request_counter"] = counter
    counter.install(app)

    @app.get("/health")
    def health() -> Response:
        return Response("Ok", status=200, mimetype="text/plain")

    @app.get("/stocks")
    def stocks():
        symbols = request.args.getlist("symbol")
        if not symbols:
            return jsonify({"error": "No symbols provided"}), 400
        results = service.get_stock_data(symbols)
        return jsonify([item.to_dict() for item in results]), 200

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the API on port 8000."""
    parser = argparse.ArgumentParser(prog="sophie-api", description="Stock information API")
    parser.parse_args(argv)
    app = create_app()
    app.run(host=HOST, port=PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())