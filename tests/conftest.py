"""Shared fixtures: small on-disk trees to scan."""

from __future__ import annotations

from pathlib import Path

import pytest


def make_tree(base: Path, layout: dict) -> Path:
    """Create files/dirs from a nested dict; ``str`` values are file contents."""
    base.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        target = base / name
        if isinstance(value, dict):
            make_tree(target, value)
        else:
            target.write_text(value, encoding="utf-8")
    return base


@pytest.fixture()
def site_root(tmp_path: Path) -> Path:
    """The reference tree: two relevant files, an excluded dir, an image."""
    return make_tree(
        tmp_path / "site",
        {
            "app.py": "print('hi')\n",
            "notes.md": "# notes\n",
            "image.png": "not really a png",
            "node_modules": {"lib.js": "module.exports = {};\n"},
        },
    )


@pytest.fixture()
def deep_root(tmp_path: Path) -> Path:
    """Nested tree four levels deep with a mix of categories."""
    return make_tree(
        tmp_path / "infra",
        {
            "Dockerfile": "FROM python:3.12\n",
            "README": "read me\n",
            "etc": {
                "nginx.conf": "server {}\n",
                "app.log.json": "{}\n",
                "scripts": {
                    "deploy.sh": "#!/bin/sh\n",
                    "server.log.txt": "started\n",
                    "db": {
                        "schema.sql": "create table t (id int);\n",
                        "main.tf": "resource {}\n",
                    },
                },
            },
            "var": {
                "syslog": "boot\n",
                "app.log": "line\n",
                ".git": {"config": "[core]\n"},
            },
        },
    )
