"""Rewrite ``<head>`` metadata tags from a suggestion.

Each tag is replaced in place when present and inserted before ``</head>``
otherwise. Matching is regex based; tags written with single quotes or
unusual formatting are not recognized and end up duplicated. Values that
already carry entities are unescaped before being escaped again, so
``&amp;`` is never doubled. Pages are read and written byte for byte:
line endings are kept and bytes that are not valid UTF-8 round-trip
unchanged.
"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)
_TITLE_RE = re.compile(r"<title\b[^>]*>.*?</title>", re.IGNORECASE | re.DOTALL)
_CANONICAL_RE = re.compile(r'<link\b[^>]*(?<![\w-])rel\s*=\s*"canonical"[^>]*>', re.IGNORECASE)


def _attr_pattern(tag: str, attr: str, value: str) -> re.Pattern[str]:
    return re.compile(
        rf'<{tag}\b[^>]*(?<![\w-]){attr}\s*=\s*"{re.escape(value)}"[^>]*>', re.IGNORECASE
    )


def _text(value: Any) -> Optional[str]:
    """Return *value* as a non-empty string or ``None``."""
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v).strip() for v in value if str(v).strip())
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _escape(value: str, quote: bool = True) -> str:
    return html.escape(html.unescape(value), quote=quote)


def _append(document: str, tag: str) -> str:
    newline = "\r\n" if "\r\n" in document else "\n"
    return _HEAD_CLOSE_RE.sub(
        lambda m: f"  {tag}{newline}{m.group(0)}", document, count=1
    )


def _replace_or_append(document: str, pattern: re.Pattern[str], tag: str) -> str:
    match = pattern.search(document)
    if match is None:
        return _append(document, tag)
    return document[: match.start()] + tag + document[match.end():]


def _ensure_meta(document: str, name: str, content: Optional[str]) -> str:
    if not content:
        return document
    tag = f'<meta name="{name}" content="{_escape(content)}">'
    return _replace_or_append(document, _attr_pattern("meta", "name", name), tag)


def _ensure_property(document: str, prop: str, content: Optional[str]) -> str:
    if not content:
        return document
    tag = f'<meta property="{prop}" content="{_escape(content)}">'
    return _replace_or_append(document, _attr_pattern("meta", "property", prop), tag)


def _ensure_title(document: str, title: Optional[str]) -> str:
    if not title:
        return document
    tag = f"<title>{_escape(title, quote=False)}</title>"
    return _replace_or_append(document, _TITLE_RE, tag)


def _ensure_canonical(document: str, url: Optional[str]) -> str:
    if not url:
        return document
    tag = f'<link rel="canonical" href="{_escape(url)}">'
    return _replace_or_append(document, _CANONICAL_RE, tag)


def apply_suggestion(document: str, suggestion: Dict[str, Any]) -> str:
    """Return *document* with the head tags described by *suggestion*.

    Open Graph fields fall back to the plain title and description. Missing
    fields leave their tags untouched; ``canonical`` is only written when
    supplied.
    """

    title = _text(suggestion.get("title"))
    description = _text(suggestion.get("description"))

    updated = _ensure_meta(document, "description", description)
    updated = _ensure_meta(updated, "keywords", _text(suggestion.get("keywords")))
    updated = _ensure_title(updated, title)
    updated = _ensure_property(
        updated, "og:title", _text(suggestion.get("ogTitle")) or title
    )
    updated = _ensure_property(
        updated, "og:description", _text(suggestion.get("ogDescription")) or description
    )
    updated = _ensure_canonical(updated, _text(suggestion.get("canonical")))
    return updated


def read_page(path: str | Path) -> str:
    """Return the text of the page at *path* with line endings untouched.

    Bytes that are not valid UTF-8 are kept as surrogate escapes so the page
    can be written back unchanged.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def write_page(path: str | Path, document: str) -> None:
    """Write *document* to *path*, the inverse of :func:`read_page`."""
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.write(document)


def patch_file(path: str | Path, suggestion: Dict[str, Any]) -> str:
    """Rewrite the file at *path* with *suggestion* applied and return the text."""
    file = Path(path)
    updated = apply_suggestion(read_page(file), suggestion)
    write_page(file, updated)
    logging.info("Patched head metadata in %s", file)
    return updated
