"""Tests for logging configuration."""

import importlib
import io
import logging

import pytest

from motifkit import locate
import motifkit._logging
from motifkit._logging import configure_logging, disable_logging, get_logger


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    configure_logging(level=logging.DEBUG, format_string="%(name)s %(message)s", stream=stream)
    yield stream
    disable_logging()


def test_searches_log_at_debug(log_stream):
    locate("AAAA", "AAA")
    output = log_stream.getvalue()
    assert "motifkit.matching.prefix" in output
    assert "matches=2" in output


def test_disable_logging_silences_output(log_stream):
    disable_logging()
    locate("AAAA", "AAA")
    assert log_stream.getvalue() == ""


def test_module_loggers_are_children():
    assert get_logger("motifkit.matching.prefix").parent is get_logger()


def test_import_attaches_null_handler():
    logger = logging.getLogger("motifkit")
    logger.handlers.clear()
    importlib.reload(motifkit._logging)
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_disable_logging_leaves_only_null_handler(log_stream):
    disable_logging()
    handlers = logging.getLogger("motifkit").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
