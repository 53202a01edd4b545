import json
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from overrides import OverrideStore
from report import build_entry, write_report


def test_override_lookup(tmp_path: Path) -> None:
    path = tmp_path / "overrides.json"
    path.write_text(json.dumps({"index.html": {"title": "Home"}}), encoding="utf-8")
    store = OverrideStore(path)
    assert store.get("index.html") == {"title": "Home"}
    assert store.get("about.html") is None
    assert len(store) == 1


def test_missing_override_file_is_empty(tmp_path: Path) -> None:
    store = OverrideStore(tmp_path / "metadata" / "overrides.json")
    assert store.get("index.html") is None
    assert len(store) == 0


def test_malformed_override_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "overrides.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        OverrideStore(path)


def test_override_file_must_be_object(tmp_path: Path) -> None:
    path = tmp_path / "overrides.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        OverrideStore(path)


def test_write_report_creates_dirs_and_overwrites(tmp_path: Path) -> None:
    dest = tmp_path / "metadata" / "suggestions.json"
    write_report(dest, {"old.html": build_entry({"title": "Old"}, None)})
    write_report(dest, {"a.html": build_entry({"title": "A"}, {"title": "Manual"})})

    data = json.loads(dest.read_text(encoding="utf-8"))
    assert data == {
        "a.html": {"suggestion": {"title": "A"}, "override": {"title": "Manual"}}
    }
    assert dest.read_text(encoding="utf-8").startswith('{\n  "a.html"')
