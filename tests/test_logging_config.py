"""Tests for the shared logging setup."""

import logging

import pytest

from player_registry_api.app.core.logging_config import SERVER_LOGGERS, installed_handlers, setup_logging


@pytest.fixture
def root_logger():
    """Root logger without the application's handlers; restored afterwards."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = installed_handlers(root)
    for handler in saved_handlers:
        root.removeHandler(handler)
    saved_server = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers), logging.getLogger(name).propagate)
        for name in SERVER_LOGGERS
    }

    yield root

    for handler in installed_handlers(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
    for name, (level, handlers, propagate) in saved_server.items():
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.handlers = handlers
        server_logger.propagate = propagate


def test_level_applies_to_root_and_server_loggers(root_logger):
    logging.getLogger("uvicorn.access").addHandler(logging.NullHandler())

    setup_logging("warning")

    assert root_logger.level == logging.WARNING
    assert len(installed_handlers(root_logger)) == 1
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        assert server_logger.level == logging.WARNING
        assert server_logger.handlers == []
        assert server_logger.propagate is True


def test_repeated_setup_does_not_duplicate_handlers(root_logger):
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(installed_handlers(root_logger)) == 1
    assert root_logger.level == logging.DEBUG
    assert logging.getLogger("uvicorn").level == logging.DEBUG


def test_foreign_handlers_do_not_block_setup(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    try:
        setup_logging("INFO")
        assert len(installed_handlers(root_logger)) == 1
        assert foreign in root_logger.handlers
    finally:
        root_logger.removeHandler(foreign)


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")
    assert root_logger.level == logging.INFO


def test_log_file_handler(root_logger, tmp_path):
    logfile = tmp_path / "players.log"

    setup_logging("INFO", str(logfile))
    logging.getLogger("player_registry_api.test").info("Created player %s", 7)
    for handler in installed_handlers(root_logger):
        handler.flush()

    assert len(installed_handlers(root_logger)) == 2
    assert "Created player 7" in logfile.read_text(encoding="utf-8")
