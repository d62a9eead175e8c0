"""JSON logging formatter used by provider logging setup.

Each record becomes one JSON line. Events emitted by ``log_event`` are already
JSON objects; their keys are merged into the line instead of being nested as
an escaped string. Keys that could carry credentials are masked regardless
of where they come from.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..constants import REDACTED

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attributes present on every LogRecord; anything else was passed via ``extra=``
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "taskName"}

_MASKED_KEYS = frozenset({"api_key", "apikey", "authorization", "x-api-key", "x-goog-api-key"})


def _mask(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: (REDACTED if k.lower() in _MASKED_KEYS else v) for k, v in payload.items()}


class JsonFormatter(logging.Formatter):
    """Structured formatter emitting ``ts``, ``level``, ``logger`` plus event fields."""

    def format(self, record: logging.LogRecord) -> str:
        line: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        try:
            event = json.loads(text)
        except ValueError:
            event = None
        if isinstance(event, dict):
            line.update(_mask(event))
        else:
            line["msg"] = text
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS and not k.startswith("_")}
        for k, v in _mask(extras).items():
            line.setdefault(k, v)
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
