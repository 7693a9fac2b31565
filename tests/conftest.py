"""Shared fixtures for include-tree tests."""

from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def write_files(tmp_path):
    """Create files under tmp_path from a {relative_path: content} mapping."""

    def _write(files: Dict[str, str], base: Path = None) -> Path:
        base = base or tmp_path
        for rel_path, content in files.items():
            path = base / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return base

    return _write
