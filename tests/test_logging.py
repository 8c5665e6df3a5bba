"""
Tests for the structlog logging setup.
"""

import json
import logging

import pytest
import structlog
from fastapi.testclient import TestClient

from conftest import InMemoryEstateStore

from estate_search import logging as estate_logging
from estate_search.api.app import build_app
from estate_search.config import Settings


def test_json_logs_outside_development(monkeypatch, capsys):
    """Production logs are one JSON object per line."""
    monkeypatch.setattr(estate_logging, "settings", Settings(app_env="production", log_level="INFO"))
    estate_logging.configure_logging()

    logging.getLogger("estate_search.test").info("found %d estates", 3)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "found 3 estates"
    assert record["level"] == "info"
    assert record["logger"] == "estate_search.test"


def test_console_logs_in_development(monkeypatch, capsys):
    """Development logs are human-readable."""
    monkeypatch.setattr(estate_logging, "settings", Settings(app_env="development", log_level="DEBUG"))
    estate_logging.configure_logging()

    logging.getLogger("estate_search.test").debug("cache miss for %d", 7)

    assert "cache miss for 7" in capsys.readouterr().out


def test_settings_validation():
    """Negative limits and unknown log levels are rejected."""
    with pytest.raises(ValueError):
        Settings(nazotte_limit=-1)
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")


def test_app_startup_configures_logging():
    """Serving the app object without main() still gets structlog output."""
    logging.getLogger().handlers = []

    with TestClient(build_app(store=InMemoryEstateStore())):
        handlers = logging.getLogger().handlers

    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
