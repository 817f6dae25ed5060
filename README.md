# sophie

Sophie looks up monthly adjusted price series for Brazilian stocks (symbols
are queried with the `.SAO` suffix) and works out two figures for each:

- **ACTUAL PRICE** is the close of the most recent month in the series.
- **MAX PRICE** is the mean annual dividend over the six full years before the
  current one, divided by 0.06: the highest price at which the stock still
  yields 6% a year. Only years that appear in the series count towards the
  mean.

## Installation

```
pip install .
```

The data source needs an API key. By default it is read from the `API_KEY`
environment variable:

```
export API_KEY=placeholder
```

## Command line

```
sophie get --symbols BBAS3,ITSA4
```

`--symbols` (or `-s`) takes a comma-separated list and can be given more than
once. Rows are printed in the order the symbols were given, for example:

```
STOCK      ACTUAL PRICE  MAX PRICE
BBAS3.SAO  27.43         28.15
ITSA4.SAO  9.95          7.27
```

Without any symbols the command prints
``You need to pass at least one argument to `--symbols` `` and exits. Run
without the `get` subcommand, it prints its help.

If a symbol cannot be fetched or its data cannot be aggregated, a line
`Error fetching data for symbol: ...` is printed and that symbol's row has an
empty name and `N/A` prices.

## HTTP API

```
sophie-api
```

This starts the Flask development server on `0.0.0.0`, port 8000, with two
routes:

- `GET /health` answers `Ok` as plain text.
- `GET /stocks?symbol=BBAS3&symbol=ITSA4` answers with a JSON list of
  `{"Stock": ..., "MaxStockPrice": ..., "ActualPrice": ...}` objects, one per
  symbol. With no `symbol` parameter it answers 400 with
  `{"error": "No symbols provided"}`.

Every response is counted in a `sophie.metrics.RequestCounter` by method,
route and status code; requests to unknown routes are counted with an empty
route. `RequestCounter.count(method, route, status_code)` and
`RequestCounter.snapshot()` read the counts back.

## Library use

```python
from sophie.gateway import AlphavantageGateway
from sophie.service import AlphavantageService
from sophie.printer import print_agg_stock_data_table

service = AlphavantageService(AlphavantageGateway(api_key="placeholder"))
print_agg_stock_data_table(service.get_stock_data(["BBAS3", "ITSA4"]))
```

- `sophie.gateway.AlphavantageGateway(session, api_key)` fetches a symbol's
  series and raises `GatewayError` on network errors, non-200 answers
  (`error: 500 Internal Server Error`) and undecodable bodies.
- `sophie.service.aggregate_dividend_per_year(stock, current_year)` computes
  the two figures for one `sophie.stock.Stock`; `current_year` defaults to
  this year. It raises `ValueError` when a date has no valid year or the
  latest close is not a number.
- `sophie.stock.Stock.from_json(text)` parses an API response.
- `sophie.printer.stdout_print(value, file)` prints a value as JSON indented
  by two spaces.
- `sophie.api.create_app(service, counter)` builds the Flask application
  around any object that has a `get_stock_data(symbols)` method.
- `sophie.log.get_logger(environment)` returns the `sophie` logger; with
  environment `PROD` (the default is the `ENVIRONMENT` variable) it writes
  JSON lines to standard output.

## What it does not do

Request counts are kept in memory only; they are not exported to any metrics
collector, and no traces are recorded. The server is Flask's development
server, not a production deployment.