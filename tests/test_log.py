import json
import logging

import pytest

from sophie.log import get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    get_logger("DEV")


def test_prod_logs_json_to_stdout(capsys):
    logger = get_logger("PROD")
    logger.info("hello")
    record = json.loads(capsys.readouterr().out.strip())
    assert record["msg"] == "hello"
    assert record["level"] == "INFO"
    assert "time" in record


def test_prod_warning_level_name(capsys):
    get_logger("PROD").warning("careful")
    record = json.loads(capsys.readouterr().out.strip())
    assert record["level"] == "WARN"
    assert record["msg"] == "careful"


def test_environment_variable_selects_prod(monkeypatch, capsys):
    monkeypatch.setenv("ENVIRONMENT", "PROD")
    get_logger().info("from env")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["msg"] == "from env"


def test_repeated_prod_calls_do_not_duplicate_output(capsys):
    get_logger("PROD")
    get_logger("PROD").info("once")
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_non_prod_uses_standard_logging(capsys, caplog):
    get_logger("PROD")
    logger = get_logger("DEV")
    with caplog.at_level(logging.INFO, logger=logger.name):
        logger.info("plain")
    assert capsys.readouterr().out == ""
    assert [r.getMessage() for r in caplog.records] == ["plain"]