"""Structured logging for the bridgeai client.

All modules log through the shared ``bridgeai`` logger. Events are emitted as
one JSON object per line (``log_event``); ``normalized_log_event`` adds the
canonical keys used by the dispatcher (``phase``, ``attempt``, ``error_code``,
``tokens``) so retry, fallback and stream events can be filtered uniformly.

Environment:
    BRIDGEAI_LOG_LEVEL: level name for the shared logger (default ``INFO``).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

ROOT_LOGGER_NAME = "bridgeai"
LOG_LEVEL_ENV = "BRIDGEAI_LOG_LEVEL"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_CONSOLE_HANDLER_ATTR = "_bridgeai_console_handler"
_FILE_HANDLER_ATTR = "_bridgeai_file_handler"
_INITIALIZED_ATTR = "_bridgeai_initialized"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name (case-insensitive); unknown values yield ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_root_logger(json_mode: bool, level: int) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    desired = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired)
    if getattr(logger, _INITIALIZED_ATTR, False):
        for handler in logger.handlers:
            if not getattr(handler, _CONSOLE_HANDLER_ATTR, False):
                continue
            handler.setLevel(desired)
            # pytest's capture may have swapped or closed stderr since init
            stream = getattr(handler, "stream", None)
            if stream is None or getattr(stream, "closed", False) or stream is not sys.stderr:
                with contextlib.suppress(ValueError):
                    handler.setStream(sys.stderr)
            if json_mode != isinstance(handler.formatter, JsonFormatter):
                handler.setFormatter(_formatter(json_mode))
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _INITIALIZED_ATTR, True)
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the configured ``bridgeai`` logger."""
    root = _ensure_root_logger(json_mode=json_mode, level=level)
    if name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Attach a rotating file handler (10MB x 5 backups) writing to this
        path. ``None`` removes any file handler previously attached here.
    json_mode:
        JSON lines (default) or plain text for the file handler.

    Handlers attached by callers are left untouched.
    """
    logger = get_logger(json_mode=json_mode)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for handler in logger.handlers:
            handler.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in managed:
        if abs_path is not None and getattr(handler, "baseFilename", None) == abs_path:
            handler.setFormatter(_formatter(json_mode))
            handler.setLevel(logger.level)
            return logger
        logger.removeHandler(handler)
        handler.close()
    if abs_path is None:
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit ``event`` as a single JSON object.

    ``ctx`` fields are merged first, then ``fields``. Keys whose value is
    ``None`` are dropped unless ``keep_none`` is set.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "error_code", "tokens")


def _coerce_tokens(tokens: Any) -> Any:
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens)
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit ``event`` with the normalized key set always present.

    ``error_code`` is omitted when ``None``; the other normalized keys are
    kept as JSON ``null``. ``extra_fields`` never overwrite normalized values.
    """
    fields: Dict[str, Any] = {
        "phase": phase,
        "attempt": attempt,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is not None and k not in fields:
            fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "ROOT_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
