"""CLI tests: dry-run planning, missing-key guidance and exit codes.

Network is never used: executing paths swap the default httpx transport for
the ``fake_transport`` fixture.
"""
from __future__ import annotations

import json

import pytest

from metadesc_providers.base import abstract_provider
from metadesc_providers.service import cli as metadesc_cli
from metadesc_providers.service.cli.cli_parser import build_parser

KEY = "sk-cli-test-87654321"  # pragma: allowlist secret


def _last_json(stream: str):
    """Parse the CLI's JSON line (log records may share the stream)."""
    lines = [line for line in stream.splitlines() if line.strip()]
    return json.loads(lines[-1])


@pytest.fixture()
def wired_transport(monkeypatch, fake_transport):
    monkeypatch.setattr(abstract_provider, "HttpxTransport", lambda purpose: fake_transport)
    return fake_transport


def test_parser_subcommands():
    args = build_parser().parse_args(["summarize", "--provider", "gemini", "--prompt", "hi", "--execute"])
    assert (args.cmd, args.provider, args.prompt, args.execute) == ("summarize", "gemini", "hi", True)  # nosec B101
    assert build_parser().parse_args(["models"]).provider == "openai"  # nosec B101


def test_providers_lists_identities(capsys):
    assert metadesc_cli.main(["providers"]) == 0  # nosec B101
    rows = json.loads(capsys.readouterr().out)
    assert [r["name"] for r in rows] == ["openai", "anthropic", "gemini", "deepseek", "xai"]  # nosec B101


def test_default_subcommand_is_dry_run_plan(monkeypatch, capsys, wired_transport):
    monkeypatch.setenv("ANTHROPIC_API_KEY", KEY)
    code = metadesc_cli.main(["--provider", "anthropic", "--prompt", "Write about dogs"])
    assert code == 0  # nosec B101
    plan = json.loads(capsys.readouterr().out)
    assert plan["api_key_present"] is True  # nosec B101
    assert plan["request"]["url"] == "https://api.anthropic.com/v1/messages"  # nosec B101
    assert plan["request"]["headers"]["x-api-key"] == "[redacted]"  # nosec B101
    assert KEY not in json.dumps(plan)  # nosec B101
    assert wired_transport.requests == []  # nosec B101


def test_execute_missing_key_prints_hint_and_exits(capsys):
    code = metadesc_cli.main(["summarize", "--provider", "gemini", "--prompt", "hi", "--execute"])
    assert code == 2  # nosec B101
    data = _last_json(capsys.readouterr().err)
    assert data["error"].startswith("missing API key")  # nosec B101
    assert data["set_one_of_env"] == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]  # nosec B101


def test_models_missing_key_exits_2(capsys):
    assert metadesc_cli.main(["models", "--provider", "openai"]) == 2  # nosec B101
    assert "OPENAI_API_KEY" in capsys.readouterr().err  # nosec B101


def test_unknown_provider_exits_2(capsys):
    assert metadesc_cli.main(["summarize", "--provider", "nope", "--prompt", "x"]) == 2  # nosec B101
    assert metadesc_cli.main(["models", "--provider", "nope"]) == 2  # nosec B101


def test_execute_success_prints_summary(monkeypatch, capsys, wired_transport):
    monkeypatch.setenv("OPENAI_API_KEY", KEY)
    wired_transport.queue_json({"choices": [{"message": {"content": "  Cats are great pets.  "}}]})
    code = metadesc_cli.main(["summarize", "--prompt", "Write about cats", "--execute", "--model", "gpt-4"])
    assert code == 0  # nosec B101
    assert capsys.readouterr().out.strip() == "Cats are great pets."  # nosec B101
    assert wired_transport.last.json_body["model"] == "gpt-4"  # nosec B101


def test_execute_provider_failure_exits_1(monkeypatch, capsys, wired_transport):
    monkeypatch.setenv("OPENAI_API_KEY", KEY)
    wired_transport.queue_json({"error": {"message": "quota exceeded"}}, status=429)
    assert metadesc_cli.main(["summarize", "--prompt", "x", "--execute"]) == 1  # nosec B101
    err = _last_json(capsys.readouterr().err)["error"]
    assert err["code"] == "http" and err["status_code"] == 429 and err["message"] == "quota exceeded"  # nosec B101


def test_models_success(monkeypatch, capsys, wired_transport):
    monkeypatch.setenv("XAI_API_KEY", KEY)
    wired_transport.queue_json({"data": [{"id": "grok-4"}, {"id": "other"}]})
    assert metadesc_cli.main(["models", "--provider", "xai"]) == 0  # nosec B101
    assert json.loads(capsys.readouterr().out) == [{"id": "grok-4", "displayName": "grok-4"}]  # nosec B101


def test_content_file_builds_prompt(tmp_path, capsys, wired_transport):
    page = tmp_path / "page.html"
    page.write_text("<h1>Bakery</h1><p>Fresh bread every morning.</p>", encoding="utf-8")
    code = metadesc_cli.main(["summarize", "--content-file", str(page), "--title", "Our Bakery"])
    assert code == 0  # nosec B101
    plan = json.loads(capsys.readouterr().out)
    content = plan["request"]["body"]["messages"][0]["content"]
    assert "Title: Our Bakery" in content and "Fresh bread every morning." in content  # nosec B101
    assert plan["api_key_present"] is False  # nosec B101


def test_missing_content_file_exits_2(tmp_path, capsys):
    assert metadesc_cli.main(["summarize", "--content-file", str(tmp_path / "none.html")]) == 2  # nosec B101
    assert "cannot build prompt" in capsys.readouterr().err  # nosec B101


def test_execute_without_prompt_exits_2(capsys):
    assert metadesc_cli.main(["summarize", "--execute"]) == 2  # nosec B101
