import logging

import pytest
from pythonjsonlogger import jsonlogger

from covid_browser.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_is_the_default(monkeypatch):
    monkeypatch.delenv("COVID_BROWSER_LOG_FORMAT", raising=False)

    configure_logging()

    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)


def test_plain_format_from_env(monkeypatch):
    monkeypatch.setenv("COVID_BROWSER_LOG_FORMAT", "PLAIN")

    configure_logging(level=logging.DEBUG)

    root = logging.getLogger()
    (handler,) = root.handlers
    assert not isinstance(handler.formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.DEBUG


def test_force_format_wins_over_env(monkeypatch):
    monkeypatch.setenv("COVID_BROWSER_LOG_FORMAT", "plain")

    configure_logging(force_format="json")

    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)
