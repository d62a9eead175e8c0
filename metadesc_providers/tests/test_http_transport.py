"""HttpxTransport against ``httpx.MockTransport`` (no sockets)."""
from __future__ import annotations

import json

import httpx
import pytest

from metadesc_providers.base.errors import ErrorCode, TransportError
from metadesc_providers.base.http import HttpResponse, HttpTransport, HttpxTransport
from metadesc_providers.openai import OpenAIProvider


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_request_passes_json_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"ok": True})

    t = HttpxTransport(_client(handler))
    resp = t.request("POST", "https://api.test/v1/x", headers={"Authorization": "Bearer k"}, json_body={"a": 1}, timeout=5)

    assert isinstance(t, HttpTransport)  # nosec B101
    assert isinstance(resp, HttpResponse) and resp.ok  # nosec B101
    assert json.loads(resp.body) == {"ok": True}  # nosec B101
    assert seen == {"method": "POST", "url": "https://api.test/v1/x", "auth": "Bearer k", "body": {"a": 1}}  # nosec B101


def test_non_2xx_is_returned_not_raised():
    t = HttpxTransport(_client(lambda r: httpx.Response(500, text="boom")))
    resp = t.request("GET", "https://api.test/v1/models", headers={}, timeout=5)
    assert resp.status_code == 500 and not resp.ok and resp.text == "boom"  # nosec B101


def test_connect_error_becomes_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    t = HttpxTransport(_client(handler))
    with pytest.raises(TransportError) as info:
        t.request("GET", "https://api.test/", headers={}, timeout=1)
    assert not info.value.timeout  # nosec B101


def test_timeout_becomes_transport_error_with_flag():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    t = HttpxTransport(_client(handler))
    with pytest.raises(TransportError) as info:
        t.request("GET", "https://api.test/", headers={}, timeout=1)
    assert info.value.timeout  # nosec B101


def test_provider_over_real_httpx_transport():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/models"):
            return httpx.Response(200, json={"data": [{"id": "gpt-4o"}, {"id": "whisper-1"}]})
        return httpx.Response(200, json={"choices": [{"message": {"content": "Done. "}}]})

    p = OpenAIProvider(api_key="sk-mock-12345678", transport=HttpxTransport(_client(handler)))
    assert p.generate_summary("hi").text == "Done."  # nosec B101
    assert [m.id for m in p.fetch_models().unwrap()] == ["gpt-4o"]  # nosec B101


def test_provider_maps_connect_error_to_transport_code():
    def handler(request):
        raise httpx.ConnectError("dns failure", request=request)

    p = OpenAIProvider(api_key="sk-mock-12345678", transport=HttpxTransport(_client(handler)))
    err = p.generate_summary("hi").error
    assert err.code is ErrorCode.TRANSPORT  # nosec B101
    assert err.message.startswith("Could not reach the OpenAI API")  # nosec B101
