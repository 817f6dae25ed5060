from flask import Flask

from sophie.metrics import RequestCounter


def _app(counter: RequestCounter) -> Flask:
    app = Flask("metrics-test")

    @app.get("/health")
    def health():
        return "Ok"

    @app.get("/items/<name>")
    def item(name):
        return name

    return counter.install(app)


def test_add_and_count():
    counter = RequestCounter()
    counter.add("GET", "/stocks", 200)
    counter.add("GET", "/stocks", "200")
    counter.add("POST", "/stocks", 200)
    assert counter.count("GET", "/stocks", 200) == 2
    assert counter.count("POST", "/stocks", "200") == 1
    assert counter.count("DELETE", "/stocks", 200) == 0


def test_snapshot_is_a_copy():
    counter = RequestCounter()
    counter.add("GET", "/health", 200)
    snap = counter.snapshot()
    assert snap == {("GET", "/health", "200"): 1}
    counter.add("GET", "/health", 200)
    assert snap == {("GET", "/health", "200"): 1}
    assert counter.snapshot()[("GET", "/health", "200")] == 2


def test_name_matches_source():
    counter = RequestCounter()
    assert counter.name == "api_request_count"
    assert counter.description == "Counts the number of HTTP requests"


def test_install_counts_matched_route():
    counter = RequestCounter()
    client = _app(counter).test_client()
    client.get("/health")
    client.get("/health")
    assert counter.count("GET", "/health", 200) == 2


def test_install_uses_route_template():
    counter = RequestCounter()
    client = _app(counter).test_client()
    client.get("/items/a")
    client.get("/items/b")
    assert counter.snapshot() == {("GET", "/items/<name>", "200"): 2}


def test_install_counts_unmatched_route_with_empty_route():
    counter = RequestCounter()
    client = _app(counter).test_client()
    response = client.get("/missing")
    assert counter.count("GET", "", response.status_code) == 1
    assert counter.count("GET", "", "404") == 1