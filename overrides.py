"""Read-only store of manually curated metadata.

Overrides are attached to each report entry for reference and are never
merged into the metadata written to pages.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


class OverrideStore:
    """Mapping from page path to a hand-written metadata record."""

    def __init__(self, path: str | Path) -> None:
        self.file = Path(path)
        if self.file.exists():
            self._data: Dict[str, Any] = json.loads(
                self.file.read_text(encoding="utf-8")
            )
            if not isinstance(self._data, dict):
                raise ValueError(f"{self.file} must contain a JSON object")
            logging.info("Loaded %d overrides from %s", len(self._data), self.file)
        else:
            self._data = {}

    def get(self, file_path: str) -> Optional[Any]:
        """Return the override recorded for ``file_path`` or ``None``."""
        return self._data.get(file_path)

    def __len__(self) -> int:
        return len(self._data)
