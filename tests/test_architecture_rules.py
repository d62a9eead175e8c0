"""Architecture enforcement tests for the provider layer.

Lightweight, repository-local invariants keeping the provider packages
decoupled from outer layers. These are static-file scans to avoid import-time
side effects, and they emit clear failure messages for quick remediation.

Rules validated here:
1) Provider modules must not import ``metadesc_providers.service`` (the CLI
   presentation layer).
2) ``metadesc_providers/base`` must not import vendor packages directly; the
   factory resolves adapters by module path string only.
3) Vendor adapters perform no I/O of their own: they never import ``httpx``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_ROOT = REPO_ROOT / "metadesc_providers"
VENDOR_PACKAGES = ("openai", "anthropic", "gemini", "deepseek", "xai")


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under ``root``, skipping tests and caches."""
    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _scan(root: Path, patterns: List[re.Pattern[str]]) -> List[str]:
    offenders: List[str] = []
    for py in _iter_python_files(root):
        src = _read_text(py)
        offenders.extend(f"{py}: matches '{p.pattern}'" for p in patterns if p.search(src))
    return offenders


def test_providers_do_not_import_service_layer() -> None:
    if not PACKAGE_ROOT.is_dir():
        pytest.skip("metadesc_providers package not found; skipping boundary check")

    patterns = [
        re.compile(r"^\s*from\s+metadesc_providers\.service", re.MULTILINE),
        re.compile(r"^\s*import\s+metadesc_providers\.service", re.MULTILINE),
        re.compile(r"^\s*from\s+\.+service\b", re.MULTILINE),
    ]
    offenders: List[str] = []
    for sub in ("base", "config", *VENDOR_PACKAGES):
        offenders.extend(_scan(PACKAGE_ROOT / sub, patterns))
    if offenders:
        pytest.fail("Providers must not import the service/presentation layer.\n" + "\n".join(offenders))


def test_base_does_not_import_vendor_packages() -> None:
    names = "|".join(VENDOR_PACKAGES)
    patterns = [
        re.compile(rf"^\s*from\s+\.\.(?:{names})\b", re.MULTILINE),
        re.compile(rf"^\s*(?:from|import)\s+metadesc_providers\.(?:{names})\b", re.MULTILINE),
    ]
    offenders = _scan(PACKAGE_ROOT / "base", patterns)
    if offenders:
        pytest.fail("Base layer must stay vendor-agnostic.\n" + "\n".join(offenders))


def test_vendor_adapters_delegate_io_to_transport() -> None:
    patterns = [re.compile(r"^\s*(?:import|from)\s+httpx\b", re.MULTILINE)]
    offenders: List[str] = []
    for sub in VENDOR_PACKAGES:
        offenders.extend(_scan(PACKAGE_ROOT / sub, patterns))
    if offenders:
        pytest.fail("Vendor adapters must not open connections themselves.\n" + "\n".join(offenders))
