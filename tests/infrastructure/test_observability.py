"""Structured logging — JSONFormatter output shape and setup_logging wiring."""

import json
import logging

import pytest

from usersearch.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "usersearch.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "usersearch.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="INVALID_ORDER", result_count=0, unrelated="x"),
    ))
    assert log["error_code"] == "INVALID_ORDER"
    assert log["result_count"] == 0
    assert "unrelated" not in log


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.root.handlers if h.get_name() == "usersearch"]


def test_setup_logging_text_format_and_level(restore_root_logger):
    setup_logging("DEBUG", "text")
    (handler,) = _own_handlers()
    assert logging.root.level == logging.DEBUG
    assert not isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_json_format(restore_root_logger):
    setup_logging("warning", "json")
    (handler,) = _own_handlers()
    assert logging.root.level == logging.WARNING
    assert isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_repeated_calls_keep_one_handler(restore_root_logger):
    foreign = logging.NullHandler()
    logging.root.addHandler(foreign)
    setup_logging("INFO", "json")
    setup_logging("INFO", "text")
    assert len(_own_handlers()) == 1
    assert foreign in logging.root.handlers
