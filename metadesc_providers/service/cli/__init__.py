"""Meta-description providers debugging CLI (package entrypoint).

This package wires argument parsing to action handlers kept in
``cli_actions``. It performs no provider logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
- ``plan_summary``: dry-run planner used by tests
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_models, handle_providers, handle_summarize
from .cli_actions import plan_summary
from .cli_parser import SUBCOMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 provider failure, 2 usage/config error).
    """
    p = build_parser()
    # Inject default subcommand "summarize" when omitted.
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if not argv_list or argv_list[0] not in SUBCOMMANDS and argv_list[0] not in {"-h", "--help"}:
        argv_list = ["summarize"] + argv_list
    args = p.parse_args(argv_list)

    if args.cmd == "providers":
        return handle_providers(args)
    if args.cmd == "models":
        return handle_models(args)
    return handle_summarize(args)


__all__ = ["main", "plan_summary"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
