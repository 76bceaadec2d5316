"""Tests for category precedence."""

import pytest

from local_scanner.core.categorize import categorize
from local_scanner.model import Category


@pytest.mark.parametrize(
    "ext, name, expected",
    [
        (".yaml", "values.yaml", Category.CONFIGURATION),
        (".ini", "php.ini", Category.CONFIGURATION),
        (".md", "notes.md", Category.DOCUMENTATION),
        (".pdf", "manual.pdf", Category.DOCUMENTATION),
        (".ps1", "setup.ps1", Category.SCRIPT),
        (".py", "app.py", Category.SOURCE_CODE),
        (".go", "main.go", Category.SOURCE_CODE),
        (".log", "app.log", Category.LOG),
        ("", "syslog", Category.LOG),
        (".sql", "schema.sql", Category.DATABASE),
        ("", "Dockerfile", Category.CONTAINER),
        ("", ".dockerignore", Category.CONTAINER),
        (".tf", "main.tf", Category.INFRASTRUCTURE),
        (".tfvars", "prod.tfvars", Category.INFRASTRUCTURE),
        ("", "Makefile", Category.OTHER),
        ("", "LICENSE", Category.OTHER),
    ],
)
def test_basic_rules(ext, name, expected):
    assert categorize(ext, name) is expected


class TestPrecedence:
    def test_extension_rules_beat_log_name(self):
        assert categorize(".json", "app.log.json") is Category.CONFIGURATION

    def test_documentation_beats_log_name(self):
        assert categorize(".txt", "server.log.txt") is Category.DOCUMENTATION

    def test_compose_file_is_configuration(self):
        assert categorize(".yml", "docker-compose.yml") is Category.CONFIGURATION

    def test_log_name_beats_database(self):
        assert categorize(".sql", "changelog.sql") is Category.LOG

    def test_log_name_beats_container(self):
        assert categorize("", "docker-login") is Category.LOG

    def test_catalog_contains_log(self):
        """Name check is a plain substring test."""
        assert categorize(".tf", "catalog.tf") is Category.LOG

    def test_extension_case_is_ignored(self):
        assert categorize(".PY", "APP.PY") is Category.SOURCE_CODE


def test_deterministic_and_total():
    samples = [(".cfg", "a.cfg"), ("", "blob"), (".bin", "x.bin"), (".c", "m.c")]
    for ext, name in samples:
        first = categorize(ext, name)
        assert isinstance(first, Category)
        assert all(categorize(ext, name) is first for _ in range(3))
