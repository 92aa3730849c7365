"""Shared fixtures: a dummy project on disk and the same tree in memory."""

from __future__ import annotations

from pathlib import Path

import pytest

from specproj.config import (
    DEFAULT_ENV_DIR,
    DEFAULT_ENV_FILE_NAME,
    ENV_DIRECTORY_NAME,
    MANIFEST_FILE,
)
from specproj.fs import MemoryFileSystem

DUMMY_DIRS = [
    "specs/nested/deep_nested",
    "concepts/nested/deep_nested",
    f"{ENV_DIRECTORY_NAME}/{DEFAULT_ENV_DIR}",
]

DUMMY_FILES = [
    MANIFEST_FILE,
    "specs/first.spec",
    "specs/second.spec",
    "specs/nested/nested.spec",
    "specs/nested/deep_nested/deep_nested.spec",
    "concepts/first.cpt",
    "concepts/nested/nested.cpt",
    "concepts/nested/deep_nested/deep_nested.cpt",
    f"{ENV_DIRECTORY_NAME}/{DEFAULT_ENV_DIR}/{DEFAULT_ENV_FILE_NAME}",
]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A dummy project under tmp_path, returned as its absolute root."""
    root = tmp_path / "dummy_proj"
    for d in DUMMY_DIRS:
        (root / d).mkdir(parents=True, exist_ok=True)
    for f in DUMMY_FILES:
        (root / f).touch()
    return root


@pytest.fixture
def memfs() -> MemoryFileSystem:
    """The dummy project at /work/dummy_proj, with /work as working directory."""
    fs = MemoryFileSystem(cwd="/work")
    for d in DUMMY_DIRS:
        fs.makedirs(f"dummy_proj/{d}")
    for f in DUMMY_FILES:
        fs.add_file(f"dummy_proj/{f}")
    return fs
