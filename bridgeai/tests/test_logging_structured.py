"""Focused tests for bridgeai.base.logging.

Covers:
- _parse_level string parsing
- normalized_log_event emits the required key set
- log_event drops None values and merges context
- configure_logger file handler and JsonFormatter output
"""
from __future__ import annotations

import json
import logging

from bridgeai.base.log_support import JsonFormatter, LogContext
from bridgeai.base.logging import (
    LOG_LEVEL_ENV,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from bridgeai.base.models import TokenUsage
from fakes import ListHandler


def _logger_with_handler(name: str):
    logger = get_logger(name)
    handler = ListHandler()
    logger.handlers[:] = [handler]
    return logger, handler


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_children_share_root():
    child = get_logger("client")
    assert child.name == "bridgeai.client"  # nosec B101
    assert get_logger("bridgeai.client") is child  # nosec B101
    assert child.propagate is True  # nosec B101
    assert get_logger().propagate is False  # nosec B101


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    try:
        assert get_logger().level == logging.ERROR  # nosec B101
    finally:
        monkeypatch.delenv(LOG_LEVEL_ENV)
        get_logger()


def test_normalized_log_event_emits_required_keys():
    logger, handler = _logger_with_handler("tests.logging.normalized")
    ctx = LogContext(provider="p", model="m", request_hash="abc")
    normalized_log_event(
        logger,
        "retry.attempt",
        ctx,
        phase="retry",
        attempt=2,
        error_code="rate_limit",
        tokens=TokenUsage.from_counts(10, 5),
        delay_ms=2000.0,
    )
    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["tokens"] == {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15}  # nosec B101
    assert payload["provider"] == "p" and payload["request_hash"] == "abc"  # nosec B101
    assert payload["delay_ms"] == 2000.0  # nosec B101


def test_normalized_log_event_omits_missing_error_code():
    logger, handler = _logger_with_handler("tests.logging.noerror")
    normalized_log_event(logger, "chat.end", phase="finalize", phase_extra=None)
    payload = json.loads(handler.messages[-1])
    assert "error_code" not in payload  # nosec B101
    assert payload["attempt"] is None and payload["tokens"] is None  # nosec B101
    assert "phase_extra" not in payload  # nosec B101


def test_log_event_drops_none_and_merges_context():
    logger, handler = _logger_with_handler("tests.logging.plain")
    ctx = LogContext(provider="p", extra={"session": "s1", "skip": None})
    log_event(logger, "chat.start", ctx, turns=3, missing=None)
    payload = json.loads(handler.messages[-1])
    assert payload == {"event": "chat.start", "provider": "p", "session": "s1", "turns": 3}  # nosec B101


def test_log_context_with_provider_copies():
    ctx = LogContext(provider="a", model="m", extra={"k": 1})
    other = ctx.with_provider("b")
    assert other.provider == "b" and other.model is None  # nosec B101
    assert ctx.provider == "a" and other.extra is not ctx.extra  # nosec B101


def test_json_formatter_hoists_event_fields():
    record = logging.LogRecord("bridgeai", logging.INFO, __file__, 1, json.dumps({"event": "x", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "x" and out["n"] == 1  # nosec B101
    assert out["level"] == "INFO"  # nosec B101


def test_configure_logger_writes_file(tmp_path):
    path = tmp_path / "logs" / "bridgeai.log"
    logger = configure_logger(file_path=str(path))
    try:
        log_event(get_logger("tests.logging.file"), "file.event", value=1)
        for handler in logger.handlers:
            handler.flush()
        lines = path.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["event"] == "file.event"  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "baseFilename", None) == str(path) for h in logger.handlers)  # nosec B101
