from __future__ import annotations

import logging

import pytest
from pythonjsonlogger import jsonlogger

from gacha_browser.logging_config import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    configure_logging,
    resolve_log_level,
)


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_levels = {
        name: logging.getLogger(name).level for name in ("", "werkzeug", "urllib3")
    }
    yield
    root.handlers[:] = saved_handlers
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("10", 10),
        (30, 30),
        ("chatty", logging.INFO),
    ],
)
def test_resolve_log_level(value, expected):
    assert resolve_log_level(value) == expected


def test_level_comes_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")

    configure_logging(force_format="plain")

    assert logging.getLogger().level == logging.ERROR


def test_explicit_level_wins_over_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")

    configure_logging(level="debug", force_format="plain")

    assert logging.getLogger().level == logging.DEBUG


def test_json_is_default_format(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)

    configure_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)


def test_plain_format_from_env(monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "PLAIN")

    configure_logging()

    formatter = logging.getLogger().handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)


def test_server_loggers_quietened_unless_debugging():
    configure_logging(level="info", force_format="plain")
    assert logging.getLogger("werkzeug").level == logging.WARNING

    configure_logging(level="debug", force_format="plain")
    assert logging.getLogger("werkzeug").level == logging.DEBUG


def test_repeated_setup_does_not_stack_handlers():
    configure_logging(force_format="plain")
    configure_logging(force_format="plain")

    assert len(logging.getLogger().handlers) == 1
