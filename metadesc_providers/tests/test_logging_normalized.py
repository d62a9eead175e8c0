"""Focused tests for metadesc_providers.base.logging.

Covers:
- _parse_level string parsing
- normalized_log_event emits required keys
- provider calls emit start/end/error events without credentials
- configure_logger attaches a rotating file handler
"""
from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from metadesc_providers.anthropic import AnthropicProvider
from metadesc_providers.base.log_support import JsonFormatter, LogContext
from metadesc_providers.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    normalized_log_event,
)
from metadesc_providers.gemini import GeminiProvider
from metadesc_providers.openai import OpenAIProvider

KEY = "sk-log-test-abcdefgh"  # pragma: allowlist secret


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        return [json.loads(r.getMessage()) for r in self.records]


@pytest.fixture()
def captured() -> Iterator[_ListHandler]:
    base = get_logger()
    handler = _ListHandler()
    base.addHandler(handler)
    previous = base.level
    base.setLevel(logging.DEBUG)
    yield handler
    base.removeHandler(handler)
    base.setLevel(previous)


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_nests_names_under_base():
    assert get_logger("openai").name == f"{BASE_LOGGER_NAME}.openai"  # nosec B101
    assert get_logger(f"{BASE_LOGGER_NAME}.cli").name == f"{BASE_LOGGER_NAME}.cli"  # nosec B101
    assert get_logger().name == BASE_LOGGER_NAME  # nosec B101


def test_normalized_log_event_emits_required_keys(captured):
    logger = get_logger("tests.logging")
    normalized_log_event(logger, "summary.end", LogContext(provider="p", model="m"), phase="finalize", latency_ms=1.5)
    normalized_log_event(logger, "summary.error", LogContext(provider="p"), phase="finalize", emitted=False, error_code="http")

    ok, failed = captured.events()
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in ok and key in failed  # nosec B101
    assert ok["emitted"] is None and "error_code" not in ok  # nosec B101
    assert ok["provider"] == "p" and ok["model"] == "m" and ok["latency_ms"] == 1.5  # nosec B101
    assert failed["error_code"] == "http"  # nosec B101
    assert captured.records[0].levelno == logging.INFO  # nosec B101
    assert captured.records[1].levelno == logging.WARNING  # nosec B101


def test_provider_events_never_contain_key(captured, fake_transport):
    fake_transport.queue_json({"choices": [{"message": {"content": "ok"}}]})
    fake_transport.queue_json({"error": {"message": f"bad key {KEY}"}}, status=401)
    p = OpenAIProvider(api_key=KEY, transport=fake_transport)
    p.generate_summary("hello")
    p.generate_summary("hello")

    names = [e["event"] for e in captured.events()]
    assert names == ["summary.start", "summary.end", "summary.start", "summary.error"]  # nosec B101
    error_event = captured.events()[-1]
    assert error_event["error_code"] == "http" and error_event["status_code"] == 401  # nosec B101
    assert error_event["status_category"] == "auth"  # nosec B101
    for record in captured.records:
        assert KEY not in record.getMessage()  # nosec B101


def test_validation_failure_logs_error_without_start(captured, fake_transport):
    OpenAIProvider(api_key=KEY, transport=fake_transport).generate_summary(" ")
    events = captured.events()
    assert [e["event"] for e in events] == ["summary.error"]  # nosec B101
    assert events[0]["error_code"] == "validation"  # nosec B101


def test_models_events(captured, fake_transport):
    fake_transport.queue_json({"data": [{"id": "gpt-4"}]})
    OpenAIProvider(api_key=KEY, transport=fake_transport).fetch_models()
    events = captured.events()
    assert [e["event"] for e in events] == ["models.start", "models.end"]  # nosec B101
    assert events[-1]["model_count"] == 1 and events[-1]["operation"] == "models"  # nosec B101


def test_configure_logger_adds_rotating_file(tmp_path):
    log_path = tmp_path / "logs" / "providers.log"
    logger = configure_logger(level="DEBUG", file_path=str(log_path))
    try:
        file_handlers = [h for h in logger.handlers if getattr(h, "baseFilename", None) == str(log_path)]
        assert len(file_handlers) == 1  # nosec B101
        assert isinstance(file_handlers[0].formatter, JsonFormatter)  # nosec B101
        assert logger.level == logging.DEBUG  # nosec B101
        configure_logger(file_path=str(log_path))
        assert len([h for h in logger.handlers if getattr(h, "baseFilename", None) == str(log_path)]) == 1  # nosec B101
    finally:
        configure_logger(level=logging.INFO, file_path=None)
    assert not [h for h in logger.handlers if getattr(h, "baseFilename", None)]  # nosec B101


def test_json_formatter_hoists_event_and_masks_credentials():
    record = logging.LogRecord(
        "metadesc_providers.x", logging.INFO, __file__, 1, json.dumps({"event": "summary.end", "api_key": "k"}), None, None
    )
    record.authorization = "Bearer k"
    line = json.loads(JsonFormatter().format(record))
    assert line["event"] == "summary.end" and line["level"] == "INFO"  # nosec B101
    assert line["api_key"] == "[redacted]" and line["authorization"] == "[redacted]"  # nosec B101
    assert "msg" not in line  # nosec B101

    plain = logging.LogRecord("metadesc_providers.x", logging.DEBUG, __file__, 1, "closing %s", ("pool",), None)
    assert json.loads(JsonFormatter().format(plain))["msg"] == "closing pool"  # nosec B101


def test_model_list_skips_are_logged_at_debug(captured, fake_transport):
    fake_transport.queue_json({"data": [{"id": "claude-3-opus-20240229"}, {"display_name": "no id"}]})
    fake_transport.queue_json({"models": [{"displayName": "nameless"}]})

    anthropic = AnthropicProvider(api_key=KEY, transport=fake_transport).fetch_models()
    gemini = GeminiProvider(api_key=KEY, transport=fake_transport).fetch_models()

    assert [m.id for m in anthropic.unwrap()] == ["claude-3-opus-20240229"]  # nosec B101
    assert gemini.unwrap() == []  # nosec B101
    skips = [r.getMessage() for r in captured.records if r.levelno == logging.DEBUG]
    assert any(m.startswith("anthropic: skipping model entry (no string id)") for m in skips)  # nosec B101
    assert any(m.startswith("gemini: skipping model entry (no string name)") for m in skips)  # nosec B101
    assert all(KEY not in m for m in skips)  # nosec B101
