"""Tests for root logger setup."""

import logging
from contextlib import contextmanager

from airport_directory_api.app.core.logging_config import LOG_FORMAT, setup_logging


@contextmanager
def bare_root():
    """Strip the root logger's handlers (pytest's included) for the duration of the block."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_adds_console_and_file(tmp_path):
    logfile = tmp_path / "airports.log"
    with bare_root() as root:
        setup_logging("debug", str(logfile))

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert all(h.formatter._fmt == LOG_FORMAT for h in root.handlers)

        logging.getLogger("airport_directory_api.test").info("seed loaded")
        for handler in root.handlers:
            handler.flush()

    assert "[INFO] airport_directory_api.test: seed loaded" in logfile.read_text(encoding="utf-8")


def test_uvicorn_loggers_propagate_to_root():
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False

    with bare_root():
        setup_logging("warning")

    assert access.handlers == []
    assert access.propagate is True
    assert access.level == logging.WARNING


def test_setup_logging_runs_once():
    with bare_root() as root:
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(root.handlers) == 1


def test_unknown_level_falls_back_to_info():
    with bare_root() as root:
        setup_logging("chatty")
        assert root.level == logging.INFO
