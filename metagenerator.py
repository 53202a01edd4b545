"""Command line interface for the HTML metadata generator.

Scans HTML pages, asks a chat-completion model for SEO metadata and writes
the suggestions to ``metadata/suggestions.json``. With ``--apply=true`` the
suggested tags are also written into each page's ``<head>``.

Examples
--------
Report suggestions for every page under ``./site`` without touching them::

    cd site && python metagenerator.py --glob='**/*.html'

Rewrite the pages in ``blog`` in place::

    python metagenerator.py --glob='blog/*.html' --apply=true
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

from requests.exceptions import RequestException
from tqdm import tqdm

from head_patcher import patch_file, read_page
from llm_client import MetadataClient
from overrides import OverrideStore
from report import build_entry, write_report
from scanner import scan_html_files
from settings import Settings, load_settings
from text_extractor import extract_main_text


def generate(settings: Settings, client: MetadataClient) -> Optional[Dict[str, Dict[str, Any]]]:
    """Return report entries for every page matched by ``settings.glob``.

    Pages are processed one at a time. ``None`` is returned when nothing
    matched. Any error aborts the whole run.
    """

    files = scan_html_files(settings.glob, settings.root)
    if not files:
        return None
    logging.info("Generating metadata for %d files", len(files))

    overrides = OverrideStore(settings.overrides_path)
    results: Dict[str, Dict[str, Any]] = {}
    for file in tqdm(files, desc="Generating metadata", unit="file", disable=None):
        path = settings.root / file
        document = read_page(path)
        text = extract_main_text(document)
        suggestion = client.suggest(text)
        results[file] = build_entry(suggestion, overrides.get(file))
        if settings.apply and "error" not in suggestion:
            patch_file(path, suggestion)
        elif settings.apply:
            logging.warning("Leaving %s unchanged: %s", file, suggestion["error"])
    return results


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    settings = load_settings(sys.argv[1:] if argv is None else argv)
    client = MetadataClient(
        settings.api_key,
        endpoint=settings.api_url,
        model=settings.model,
        temperature=settings.temperature,
    )

    try:
        results = generate(settings, client)
        if results is None:
            print("No HTML files found.")
            return 0
        out_path = write_report(settings.report_path, results)
    except (RuntimeError, RequestException, OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"Wrote suggestions to {out_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
