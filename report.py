"""JSON report of per-page suggestions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional


def build_entry(suggestion: Dict[str, Any], override: Optional[Any]) -> Dict[str, Any]:
    """Return the report entry pairing *suggestion* with *override*."""
    return {"suggestion": suggestion, "override": override}


def write_report(path: str | Path, results: Dict[str, Dict[str, Any]]) -> Path:
    """Write *results* to *path* as indented JSON, replacing any prior report."""
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(json.dumps(results, indent=2, ensure_ascii=False), encoding="utf-8")
    return dest
