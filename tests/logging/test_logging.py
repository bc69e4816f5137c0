"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from fixpath.algorithms.fixed_length import fixed_length_search
from fixpath.algorithms.yen import yen
from fixpath.config import SearchConfig
from fixpath.logging import (
    ROOT_LOGGER_NAME,
    get_logger,
    search_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _restore_default_handler():
    """Put the default fixpath handler back after tests that swap it."""
    yield
    setup_root_logger(force=True)


def _fixpath_handlers():
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    return [h for h in root_logger.handlers if getattr(h, "_fixpath_handler", False)]


def test_setup_root_logger_single_handler():
    setup_root_logger()
    setup_root_logger()
    get_logger("fixpath.module1")
    assert len(_fixpath_handlers()) == 1


def test_setup_root_logger_returns_package_logger():
    assert setup_root_logger() is logging.getLogger("fixpath")


def test_custom_handler_and_format():
    capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s|%(message)s",
        handler=logging.StreamHandler(capture),
        force=True,
    )
    get_logger("fixpath.custom").debug("hello")
    assert "DEBUG|hello" in capture.getvalue()
    assert len(_fixpath_handlers()) == 1


def test_force_keeps_foreign_handlers():
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    try:
        setup_root_logger(force=True)
        assert foreign in root_logger.handlers
    finally:
        root_logger.removeHandler(foreign)


def test_child_loggers_inherit_package_level():
    logger1 = get_logger("fixpath.module1")
    logger2 = get_logger("fixpath.module2")
    assert logger1 is not logger2

    setup_root_logger(level=logging.WARNING, force=True)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_search_log_level():
    assert search_log_level(True) == logging.INFO
    assert search_log_level(False) == logging.DEBUG


def test_search_logs_early_exit_at_debug(square, caplog):
    with caplog.at_level(logging.DEBUG, logger="fixpath"):
        assert fixed_length_search(square, 0, 2, 2) is None
    records = [r for r in caplog.records if "shortest distance is 2" in r.getMessage()]
    assert [r.levelno for r in records] == [logging.DEBUG]


def test_search_outcome_hidden_at_info(square, caplog):
    with caplog.at_level(logging.INFO, logger="fixpath"):
        assert fixed_length_search(square, 0, 2, 2) is None
    assert "shortest distance" not in caplog.text


def test_trace_raises_search_records_to_info(square, caplog):
    config = SearchConfig(trace=True)
    with caplog.at_level(logging.INFO, logger="fixpath"):
        assert fixed_length_search(square, 0, 2, 2, config=config) is None
        assert fixed_length_search(square, 0, 2, 3, config=config) is not None
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert any("shortest distance is 2" in m for m in messages)
    assert any(m.startswith("Found path of 3 vertices") for m in messages)


def test_trace_yen_accepted_paths(five_cycle, caplog):
    with caplog.at_level(logging.INFO, logger="fixpath"):
        assert yen(five_cycle, 0, 2, 4, config=SearchConfig(trace=True)) == [0, 4, 3, 2]
    accepted = [r for r in caplog.records if r.getMessage().startswith("Yen accepted")]
    assert len(accepted) == 2
    assert all(r.levelno == logging.INFO for r in accepted)
