"""Tests for CLI logging setup."""

from __future__ import annotations

import json
import logging

from s5cid.log import JSONFormatter, configure_logging


def test_configure_text_logging():
    configure_logging("debug", "text")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert not isinstance(root.handlers[0].formatter, JSONFormatter)


def test_configure_json_logging():
    configure_logging("warn", "json")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, JSONFormatter)


def test_unknown_level_defaults_to_info():
    configure_logging("loud")
    assert logging.getLogger().level == logging.INFO


def test_json_formatter_output():
    record = logging.LogRecord("s5cid.hashing", logging.INFO, __file__, 1, "hashed %s", ("x",), None)
    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "s5cid.hashing"
    assert data["msg"] == "hashed x"
    assert "ts" in data
