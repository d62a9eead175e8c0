"""Prompt construction for meta-description requests.

Turns raw page content (often HTML from a CMS editor) into the single user
prompt sent to a provider. Output is deterministic for a given input so the
same page always yields the same request.
"""

from __future__ import annotations

import html
import re
from typing import Optional

from .config.defaults import META_DESCRIPTION_MAX_LENGTH, PROMPT_SOURCE_MAX_CHARS

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def clean_content(content: str) -> str:
    """Strip markup and entities and collapse whitespace."""
    text = _SCRIPT_STYLE_RE.sub(" ", content)
    text = _TAG_RE.sub(" ", text)
    text = html.unescape(text)
    return _WS_RE.sub(" ", text).strip()


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    cut = text[:limit]
    # Prefer a word boundary when one exists in the last fifth
    space = cut.rfind(" ")
    if space >= limit * 4 // 5:
        cut = cut[:space]
    return cut.rstrip() + " ..."


def build_meta_description_prompt(
    content: str,
    *,
    title: Optional[str] = None,
    max_length: int = META_DESCRIPTION_MAX_LENGTH,
    language: Optional[str] = None,
) -> str:
    """Return the instruction prompt for summarizing ``content``.

    Args:
        content: Page body; HTML is accepted and stripped.
        title: Optional page title given to the model as extra context.
        max_length: Character ceiling requested for the description.
        language: Optional output language (e.g. ``"German"``).

    Raises:
        ValueError: When ``content`` has no text after cleaning or
            ``max_length`` is not positive.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    source = clean_content(content or "")
    if not source:
        raise ValueError("content must contain text")
    source = _truncate(source, PROMPT_SOURCE_MAX_CHARS)

    lines = [
        f"Write an SEO meta description of at most {max_length} characters for the web page below.",
        "Summarize what the page offers in one or two plain sentences.",
        "Do not use quotation marks, hashtags or markdown. Reply with the description only.",
    ]
    if language:
        lines.append(f"Write the description in {language.strip()}.")
    lines.append("")
    clean_title = clean_content(title) if title else ""
    if clean_title:
        lines.append(f"Title: {clean_title}")
    lines.append(f"Content: {source}")
    return "\n".join(lines)


__all__ = ["build_meta_description_prompt", "clean_content"]
