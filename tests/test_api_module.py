"""Tests for local_scanner.api — programmatic engine entrypoints."""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path

import jsonschema
import pytest

from local_scanner import PathNotFoundError, ScanOptions, scan_directory, validate_instance
from local_scanner.api import generate_statistics
from local_scanner.core.errors import ConfigError


class TestScanDirectory:
    def test_reference_scenario_with_statistics(self, site_root: Path):
        report = scan_directory(str(site_root), include_statistics=True)

        assert report.root == str(site_root)
        assert [e.name for e in report.files] == ["app.py", "notes.md"]
        assert [e.name for e in report.directories] == ["site"]
        assert report.statistics is not None
        assert report.statistics.total_files == 2
        assert report.statistics.categories == {"source-code": 1, "documentation": 1}
        assert report.diagnostics == []
        assert report.cancelled is False

    def test_statistics_omitted_by_default(self, site_root: Path):
        report = scan_directory(site_root)
        assert report.statistics is None
        assert "statistics" not in report.to_dict()

    def test_nonexistent_root_raises(self, tmp_path: Path):
        with pytest.raises(PathNotFoundError, match="Path not found"):
            scan_directory(tmp_path / "missing")

    def test_dangling_symlink_root_raises(self, tmp_path: Path):
        link = tmp_path / "dangling"
        try:
            os.symlink(tmp_path / "gone", link)
        except OSError:
            pytest.skip("cannot create symlinks here")
        diagnostics = []
        with pytest.raises(PathNotFoundError):
            scan_directory(str(link), on_diagnostic=diagnostics.append)
        assert diagnostics == []

    def test_empty_result_is_success(self, tmp_path: Path):
        root = tmp_path / "empty"
        root.mkdir()
        (root / "photo.jpg").write_bytes(b"\xff\xd8")
        report = scan_directory(root, include_statistics=True)
        assert [e.name for e in report.entries] == ["empty"]
        assert report.statistics.total_files == 0

    def test_keyword_overrides(self, site_root: Path):
        report = scan_directory(
            site_root,
            include_extensions=[".png"],
            exclude_patterns=["notes"],
            max_depth=0,
        )
        assert report.options.max_depth == 0
        assert report.options.include_extensions == (".png",)
        assert report.options.exclude_patterns == ("notes",)
        assert [e.name for e in report.entries] == ["site"]

    def test_empty_exclusions_disable_filtering(self, site_root: Path):
        report = scan_directory(site_root, exclude_patterns=[])
        assert report.options.exclude_patterns == ()
        assert [e.name for e in report.entries] == [
            "site", "app.py", "node_modules", "lib.js", "notes.md",
        ]

    def test_unset_lists_mean_defaults(self, site_root: Path):
        report = scan_directory(site_root, include_extensions=None, exclude_patterns=None)
        assert [e.name for e in report.entries] == ["site", "app.py", "notes.md"]

    def test_empty_includes_keep_only_special_names(self, deep_root: Path):
        report = scan_directory(deep_root, include_extensions=[], max_depth=1)
        names = [e.name for e in report.files]
        assert names == ["Dockerfile", "README"]

    def test_options_object_is_base(self, site_root: Path):
        base = ScanOptions(max_depth=0)
        assert len(scan_directory(site_root, options=base).entries) == 1
        assert len(scan_directory(site_root, options=base, max_depth=1).entries) == 3

    def test_negative_depth_rejected(self, site_root: Path):
        with pytest.raises(ConfigError):
            scan_directory(site_root, max_depth=-1)

    def test_workers_match_sequential(self, deep_root: Path):
        one = scan_directory(deep_root, include_statistics=True)
        many = scan_directory(deep_root, include_statistics=True, workers=4)
        assert many.entries == one.entries
        assert many.statistics == one.statistics

    def test_cancel_event(self, site_root: Path):
        cancel = threading.Event()
        cancel.set()
        report = scan_directory(site_root, cancel=cancel)
        assert report.cancelled is True
        assert report.entries == []

    def test_generate_statistics_matches_report(self, deep_root: Path):
        report = scan_directory(deep_root, include_statistics=True)
        assert generate_statistics(report.entries) == report.statistics


class TestSerialization:
    def test_report_validates_against_schema(self, deep_root: Path):
        report = scan_directory(deep_root, include_statistics=True)
        validate_instance(report.to_dict(), "scan_report.schema.json")

    def test_report_is_json_serializable(self, site_root: Path):
        d = scan_directory(site_root, include_statistics=True).to_dict()
        roundtrip = json.loads(json.dumps(d))
        assert roundtrip["statistics"]["totalFiles"] == 2

    def test_entry_fields_camel_case(self, site_root: Path):
        results = scan_directory(site_root).to_dict()["results"]
        root, app = results[0], results[1]
        assert set(root) == {"path", "name", "type", "lastModified"}
        assert root["type"] == "directory"
        assert set(app) == {"path", "name", "type", "lastModified", "size", "extension", "category"}
        assert app["category"] == "source-code"

    def test_schema_rejects_directory_with_size(self, site_root: Path):
        d = scan_directory(site_root).to_dict()
        d["results"][0]["size"] = 1
        with pytest.raises(jsonschema.ValidationError):
            validate_instance(d, "scan_report.schema.json")
