"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from wgraph.algorithms import BreadthFirstSearch
from wgraph.logging import (
    LOG_LEVEL_ENV,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    parse_log_level,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from wgraph.vertex import Vertex


@pytest.fixture(autouse=True)
def _reset_logging_each_test(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    reset_logging()
    yield
    reset_logging()


def _capture_root(level=logging.INFO):
    capture = StringIO()
    setup_root_logger(
        level=level,
        format_string="%(levelname)s|%(name)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )
    return capture


def test_child_loggers_inherit_root_level():
    logger = get_logger("wgraph.some.module")
    assert logger.level == logging.NOTSET
    assert logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger.getEffectiveLevel() == logging.WARNING
    assert get_logger("wgraph.other").getEffectiveLevel() == logging.WARNING


def test_debug_toggle_filters_messages():
    capture = _capture_root()
    logger = get_logger("wgraph.toggle")

    logger.debug("hidden")
    enable_debug_logging()
    logger.debug("shown")
    disable_debug_logging()
    logger.debug("hidden-again")

    out = capture.getvalue()
    assert "DEBUG|wgraph.toggle|shown" in out
    assert "|hidden\n" not in out
    assert "hidden-again" not in out


def test_setup_is_idempotent():
    _capture_root()
    setup_root_logger(level=logging.DEBUG)
    root = logging.getLogger("wgraph")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_search_logs_at_debug():
    capture = _capture_root(level=logging.DEBUG)
    a, b = Vertex("a"), Vertex("b")
    BreadthFirstSearch().find_path(a, b)

    assert "BFS found no path Vertex('a') -> Vertex('b')" in capture.getvalue()


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.ERROR, logging.ERROR),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("15", 15),
    ],
)
def test_parse_log_level(level, expected):
    assert parse_log_level(level) == expected


def test_parse_log_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        parse_log_level("chatty")


def test_environment_sets_initial_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert get_logger("wgraph.env").getEffectiveLevel() == logging.ERROR


def test_explicit_level_overrides_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    setup_root_logger(level="debug")
    assert logging.getLogger("wgraph").level == logging.DEBUG


def test_global_level_accepts_names():
    capture = _capture_root()
    set_global_log_level("warning")
    logger = get_logger("wgraph.named")
    logger.info("quiet")
    logger.warning("loud")
    assert "quiet" not in capture.getvalue()
    assert "WARNING|wgraph.named|loud" in capture.getvalue()
