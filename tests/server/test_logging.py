"""Tests for logging setup"""
import json
import logging
import sys

import pytest
from flask import Flask, g

from src.core import Environment
from src.server.services.logging import (
    JsonFormatter,
    PrettyFormatter,
    RequestIdFilter,
    configure_logging,
    NO_REQUEST_ID,
)


@pytest.fixture
def root_logger():
    """Restore root handlers and level after configure_logging"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def make_record(msg="hello", level=logging.INFO, exc_info=None):
    record = logging.LogRecord("src.test", level, __file__, 1, msg, None, exc_info)
    RequestIdFilter().filter(record)
    return record


class TestRequestIdFilter:

    def test_outside_request(self):
        assert make_record().request_id == NO_REQUEST_ID

    def test_inside_request(self):
        app = Flask(__name__)
        with app.test_request_context("/"):
            g.request_id = "req-42"
            assert make_record().request_id == "req-42"

    def test_request_without_id(self):
        app = Flask(__name__)
        with app.test_request_context("/"):
            assert make_record().request_id == NO_REQUEST_ID


class TestFormatters:

    def test_json_formatter(self):
        entry = json.loads(JsonFormatter().format(make_record("processed image")))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "src.test"
        assert entry["msg"] == "processed image"
        assert entry["request_id"] == NO_REQUEST_ID
        assert "exc_info" not in entry

    def test_json_formatter_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record("failed", logging.ERROR, sys.exc_info())

        entry = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in entry["exc_info"]

    def test_pretty_formatter_colours_level(self):
        line = PrettyFormatter().format(make_record(level=logging.WARNING))

        assert "\033[33mWARNING\033[0m" in line
        assert line.endswith("hello")


class TestConfigureLogging:

    @pytest.mark.parametrize("env, level, formatter", [
        (Environment.LOCAL, logging.DEBUG, PrettyFormatter),
        (Environment.DEV, logging.DEBUG, JsonFormatter),
        (Environment.PROD, logging.INFO, logging.Formatter),
    ])
    def test_per_environment(self, root_logger, env, level, formatter):
        root = configure_logging(env)

        assert root is root_logger
        assert root.level == level
        assert len(root.handlers) == 1
        assert type(root.handlers[0].formatter) is formatter

    def test_reconfigure_replaces_handler(self, root_logger):
        configure_logging(Environment.LOCAL)
        configure_logging(Environment.PROD)

        assert len(root_logger.handlers) == 1

    def test_handler_stamps_request_id(self, root_logger):
        configure_logging(Environment.PROD)

        filters = root_logger.handlers[0].filters
        assert any(isinstance(f, RequestIdFilter) for f in filters)
