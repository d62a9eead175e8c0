"""CLI action handlers and provider helpers.

Purpose
-------
Subcommand handlers for the meta-description CLI, keeping the package
entrypoint minimal. This module has no top-level side effects and is safe to
import in tests.

Fallback & Error Semantics
--------------------------
- Dry-run paths avoid network I/O and only inspect configuration and the
  planned request (credential headers redacted).
- Execution paths print results to stdout and errors as JSON to stderr.
- Exit codes: ``0`` success, ``1`` provider failure, ``2`` usage or
  configuration problem (unknown provider, missing API key, unreadable input).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ...base.errors import ProviderError
from ...base.factory import ProviderFactory, UnknownProviderError
from ...base.logging import configure_logger
from ...config.env import env_var_hint
from ...prompts import build_meta_description_prompt

PROMPT_PREVIEW_CHARS = 64


def _print_error(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload), file=sys.stderr)


def _apply_logging_flags(args: argparse.Namespace) -> None:
    level = getattr(args, "log_level", None)
    file_path = getattr(args, "log_file", None)
    if level or file_path:
        configure_logger(level=level, file_path=file_path)


def instantiate_adapter(provider: str, model: Optional[str] = None) -> Tuple[Optional[Any], Optional[str]]:
    """Return ``(adapter, error)`` for ``provider``.

    The adapter resolves its key from the environment/config layer; the CLI
    never accepts keys on the command line.
    """
    try:
        return ProviderFactory.create(provider, model=model), None
    except UnknownProviderError as exc:
        return None, str(exc)


def missing_key_hint(provider: str) -> Dict[str, Any]:
    return {"error": f"missing API key for provider '{provider}'", "set_one_of_env": env_var_hint(provider)}


def _preview(prompt: Optional[str]) -> Optional[str]:
    if prompt and len(prompt) > PROMPT_PREVIEW_CHARS:
        return prompt[:PROMPT_PREVIEW_CHARS] + "..."
    return prompt


def resolve_prompt(args: argparse.Namespace) -> Optional[str]:
    """Return the prompt from ``--prompt`` or built from ``--content-file``.

    Raises
    ------
    OSError
        When the content file cannot be read.
    ValueError
        When the content file holds no text.
    """
    if args.content_file:
        content = Path(args.content_file).read_text(encoding="utf-8")
        return build_meta_description_prompt(content, title=args.title, language=args.language)
    return args.prompt


def plan_summary(*, provider: str, model: Optional[str], prompt: Optional[str]) -> Dict[str, Any]:
    """Compute a dry-run plan for a summary call without I/O.

    Returns
    -------
    Dict[str, Any]
        JSON-serializable description of the intended call. When a prompt is
        given, ``request`` holds the planned exchange with credential headers
        masked.
    """
    adapter, error = instantiate_adapter(provider, model)
    plan: Dict[str, Any] = {
        "provider": provider,
        "model": adapter.model if adapter is not None else model,
        "prompt_preview": _preview(prompt),
        "adapter_available": adapter is not None,
        "api_key_present": bool(adapter.api_key) if adapter is not None else False,
    }
    if adapter is None:
        plan["error"] = error
        return plan
    if prompt:
        try:
            plan["request"] = adapter.build_summary_request(prompt).redacted().to_dict()
        except ProviderError as exc:
            plan["error"] = exc.to_dict()
    return plan


def handle_providers(args: argparse.Namespace) -> int:
    """Print identity metadata for every supported provider."""
    _apply_logging_flags(args)
    print(json.dumps(ProviderFactory.describe(), indent=2))
    return 0


def handle_models(args: argparse.Namespace) -> int:
    """Fetch and print the provider's selectable models.

    Returns ``2`` for unknown providers or a missing key, ``1`` when the
    vendor call fails.
    """
    _apply_logging_flags(args)
    adapter, error = instantiate_adapter(args.provider)
    if adapter is None:
        _print_error({"error": error})
        return 2
    if not adapter.api_key:
        _print_error(missing_key_hint(args.provider))
        return 2
    result = adapter.fetch_models()
    if not result.ok:
        _print_error({"error": result.error.to_dict()})
        return 1
    print(json.dumps([m.to_dict() for m in result.models], indent=2))
    return 0


def handle_summarize(args: argparse.Namespace) -> int:
    """Plan (default) or execute a meta-description request."""
    _apply_logging_flags(args)
    try:
        prompt = resolve_prompt(args)
    except (OSError, ValueError) as exc:
        _print_error({"error": f"cannot build prompt: {exc}"})
        return 2

    if not args.execute:
        plan = plan_summary(provider=args.provider, model=args.model, prompt=prompt)
        print(json.dumps(plan, indent=2))
        return 0 if plan["adapter_available"] else 2

    if not prompt:
        _print_error({"error": "--prompt or --content-file is required with --execute"})
        return 2
    adapter, error = instantiate_adapter(args.provider, args.model)
    if adapter is None:
        _print_error({"error": error})
        return 2
    if not adapter.api_key:
        _print_error(missing_key_hint(args.provider))
        return 2

    result = adapter.generate_summary(prompt)
    if not result.ok:
        _print_error({"error": result.error.to_dict()})
        return 1
    print(result.text)
    return 0


__all__ = [
    "handle_models",
    "handle_providers",
    "handle_summarize",
    "instantiate_adapter",
    "missing_key_hint",
    "plan_summary",
    "resolve_prompt",
]
