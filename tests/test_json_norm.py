"""Tests for the canonical JSON normalization layer."""

import json
from datetime import datetime, timezone
from pathlib import Path

from local_scanner.model import Category
from local_scanner.model.report import ScanStatistics
from local_scanner.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    obj = json.loads(stable_json_dumps({"p": Path("a") / "b"}))
    assert obj["p"] == "a/b"


def test_datetimes_and_enums():
    when = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    obj = json.loads(stable_json_dumps({"t": when, "c": Category.SOURCE_CODE}))
    assert obj == {"t": "2024-05-01T12:00:00+00:00", "c": "source-code"}


def test_objects_with_to_dict():
    obj = json.loads(stable_json_dumps(ScanStatistics(total_files=3)))
    assert obj["totalFiles"] == 3


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
