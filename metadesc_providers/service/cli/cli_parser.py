"""CLI parser construction for metadesc-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...config.defaults import PROVIDER_CLI_DEFAULT_PROVIDER

SUBCOMMANDS = frozenset({"providers", "models", "summarize"})


def _logging_flags() -> argparse.ArgumentParser:
    """Parent parser carrying the logging flags shared by every subcommand."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--log-level", default=None, help="Override METADESC_LOG_LEVEL (e.g. DEBUG)")
    parent.add_argument("--log-file", default=None, help="Also write JSON logs to this rotating file")
    return parent


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``providers``, ``models`` and ``summarize``
        subcommands. No I/O or network calls occur here.
    """
    p = argparse.ArgumentParser(
        prog="metadesc-cli", description="Meta-description providers CLI (safe by default: dry-run)"
    )
    sub = p.add_subparsers(dest="cmd")
    common = _logging_flags()

    # providers
    sub.add_parser("providers", parents=[common], help="List supported providers as JSON")

    # models
    p_models = sub.add_parser("models", parents=[common], help="Fetch selectable models from a provider")
    p_models.add_argument("--provider", default=PROVIDER_CLI_DEFAULT_PROVIDER)

    # summarize
    p_sum = sub.add_parser(
        "summarize", parents=[common], help="Plan or execute a meta-description request (default)"
    )
    p_sum.add_argument("--provider", default=PROVIDER_CLI_DEFAULT_PROVIDER)
    p_sum.add_argument("--model", default=None)
    src = p_sum.add_mutually_exclusive_group()
    src.add_argument("--prompt", default=None, help="Send this prompt verbatim")
    src.add_argument("--content-file", default=None, help="Build the prompt from this page content (HTML ok)")
    p_sum.add_argument("--title", default=None, help="Page title used with --content-file")
    p_sum.add_argument("--language", default=None, help="Output language used with --content-file")
    p_sum.add_argument("--execute", action="store_true", help="Send the request (default: print the plan)")

    return p


__all__ = ["SUBCOMMANDS", "build_parser"]
