"""HTML file discovery for the metadata generator.

Expands a glob pattern natively instead of delegating to a shell.
"""

from __future__ import annotations

import glob
from pathlib import Path
from typing import List


def scan_html_files(pattern: str, base_path: str | Path = ".") -> List[str]:
    """Return HTML files under *base_path* matching *pattern*.

    Parameters
    ----------
    pattern:
        Glob pattern. ``**`` matches any number of directories. Relative
        patterns are resolved against ``base_path``.
    base_path:
        Directory the pattern is expanded from.

    Returns
    -------
    list[str]
        Sorted paths as matched, relative to ``base_path`` for relative
        patterns. Only regular files whose name ends in ``.html`` are kept.
    """
    base = Path(base_path)
    matches = glob.glob(pattern, root_dir=base, recursive=True)

    results: List[str] = []
    for match in sorted(set(matches)):
        if not match.endswith(".html"):
            continue
        if not (base / match).is_file():
            continue
        results.append(match)
    return results
