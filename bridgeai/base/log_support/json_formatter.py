"""JSON lines formatter for the bridgeai logger.

Messages produced by ``log_event`` are already JSON objects; their keys are
hoisted to the top level so a line never contains a double-encoded payload.
Attributes passed through ``extra=`` on a plain logging call are merged too.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render a record as ``{"ts", "level", "logger", ...event fields}``."""

    def format(self, record: logging.LogRecord) -> str:
        out = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            out.update(parsed)
        else:
            out["msg"] = text
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED or k in out:
                continue
            out[k] = v
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
