"""Visible text extraction used to build the metadata prompt."""

from __future__ import annotations

import re

MAX_TEXT_CHARS = 8000

_SCRIPT_RE = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def extract_main_text(html: str, limit: int = MAX_TEXT_CHARS) -> str:
    """Return the visible text of *html*, whitespace-collapsed and truncated.

    Script and style blocks are dropped with their contents, remaining tags
    become single spaces. Entities are left as written. Only the first
    ``limit`` characters are returned so the prompt stays small.
    """

    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    # stray brackets that never formed a tag
    text = text.replace("<", " ").replace(">", " ")
    text = _WS_RE.sub(" ", text).strip()
    return text[:limit]
