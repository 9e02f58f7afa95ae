"""
Tests for the logging module.
"""

import logging

import structlog

import core.logging as core_logging
from core.logging import configure_logging, get_logger, bind_context, clear_context


def test_configure_log_level():
    configure_logging(log_level="WARNING")
    assert logging.getLogger().level == logging.WARNING
    configure_logging(log_level="INFO")
    assert logging.getLogger().level == logging.INFO


def test_json_mode_does_not_raise():
    configure_logging(json_logs=True, log_level="INFO")
    get_logger("tests").info("hello", item="连衣裙")
    configure_logging(json_logs=False)


def test_httpx_noise_suppressed():
    configure_logging()
    assert logging.getLogger("httpx").level == logging.WARNING


def test_get_logger_has_methods():
    logger = get_logger("test.module")
    for method in ("debug", "info", "warning", "error"):
        assert hasattr(logger, method)


def test_bind_and_clear_context():
    clear_context()
    bind_context(user_id="u1")
    assert structlog.contextvars.get_contextvars() == {"user_id": "u1"}
    clear_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_configure_logging_once_skips_later_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(core_logging, "_configured", False)
    monkeypatch.setattr(core_logging, "configure_logging", lambda **kw: calls.append(kw))
    assert core_logging.configure_logging_once(json_logs=True) is True
    assert core_logging.configure_logging_once(json_logs=False) is False
    assert calls == [{"json_logs": True, "log_level": "INFO"}]
