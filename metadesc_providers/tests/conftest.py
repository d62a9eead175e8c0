"""Pytest configuration for the providers test suite.

Every test runs with a clean provider environment: credential and override
variables are removed, ``.env`` loading points at a missing file, and the
config/timeout caches are reset. No test touches the network; adapters get a
``FakeTransport`` that records requests and replays canned responses.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

import pytest

from metadesc_providers.base.http import HttpResponse
from metadesc_providers.base.logging import get_logger
from metadesc_providers.config import reset_config_cache
from metadesc_providers.config.env import ENV_ALIASES, ENV_MAP

_PROVIDER_PREFIXES = ("OPENAI", "ANTHROPIC", "GEMINI", "DEEPSEEK", "XAI")
_ENV_SUFFIXES = ("MODEL", "BASE_URL", "TIMEOUT_SECONDS")

# Bind the console handler to the session stream, not a per-test capsys buffer
get_logger()


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    json_body: Optional[Any]
    timeout: float


@dataclass
class FakeTransport:
    """Transport double returning queued responses and recording requests.

    Queue entries are ``HttpResponse`` objects or exceptions to raise.
    """

    responses: List[Any] = field(default_factory=list)
    requests: List[RecordedRequest] = field(default_factory=list)

    def queue_json(self, payload: Any, status: int = 200) -> "FakeTransport":
        self.responses.append(HttpResponse(status_code=status, body=json.dumps(payload).encode("utf-8")))
        return self

    def queue_raw(self, body: bytes, status: int = 200) -> "FakeTransport":
        self.responses.append(HttpResponse(status_code=status, body=body))
        return self

    def queue_error(self, exc: BaseException) -> "FakeTransport":
        self.responses.append(exc)
        return self

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Optional[Any] = None,
        timeout: float,
    ) -> HttpResponse:
        self.requests.append(RecordedRequest(method, url, dict(headers), json_body, timeout))
        if not self.responses:
            raise AssertionError("FakeTransport has no queued response")
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Isolate tests from developer credentials and config files."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for prefix in _PROVIDER_PREFIXES:
        names.update(f"{prefix}_{suffix}" for suffix in _ENV_SUFFIXES)
    names.update(
        {
            "METADESC_CONFIG_FILE",
            "METADESC_LOG_LEVEL",
            "METADESC_TIMEOUT_HTTP_SECONDS",
            "METADESC_TIMEOUT_MODELS_SECONDS",
        }
    )
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()
