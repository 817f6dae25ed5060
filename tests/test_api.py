from sophie.api import create_app
from sophie.metrics import RequestCounter
from sophie.service import StockService
from sophie.stock import AggStockData


class FakeService(StockService):
    def __init__(self, results):
        self.results = results
        self.calls = []

    def get_stock_data(self, symbols):
        self.calls.append(list(symbols))
        return self.results


def test_health_check():
    client = create_app(FakeService([])).test_client()
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Ok"


def test_stocks_with_symbol():
    service = FakeService(
        [AggStockData(stock="ITSA4.SAO", max_stock_price=7.27, actual_price=9.95)]
    )
    client = create_app(service).test_client()
    response = client.get("/stocks?symbol=BBAS3")
    assert response.status_code == 200
    assert response.get_json() == [
        {"Stock": "ITSA4.SAO", "MaxStockPrice": 7.27, "ActualPrice": 9.95}
    ]
    assert service.calls == [["BBAS3"]]


def test_stocks_without_symbols():
    service = FakeService([])
    client = create_app(service).test_client()
    response = client.get("/stocks")
    assert response.status_code == 400
    assert response.get_json() == {"error": "No symbols provided"}
    assert service.calls == []


def test_stocks_keeps_symbol_order():
    service = FakeService([AggStockData(), AggStockData()])
    client = create_app(service).test_client()
    response = client.get("/stocks?symbol=ITSA4&symbol=BBAS3")
    assert service.calls == [["ITSA4", "BBAS3"]]
    assert response.get_json() == [
        {"Stock": "", "MaxStockPrice": None, "ActualPrice": None},
        {"Stock": "", "MaxStockPrice": None, "ActualPrice": None},
    ]


def test_requests_are_counted():
    counter = RequestCounter()
    client = create_app(FakeService([]), counter).test_client()
    client.get("/health")
    client.get("/stocks")
    assert counter.count("GET", "/health", 200) == 1
    assert counter.count("GET", "/stocks", 400) == 1