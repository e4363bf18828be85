"""Shared test fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def make_file(path: Path, size: int) -> Path:
    """Create a (sparse) file of exactly *size* bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


@pytest.fixture
def deny_listing(monkeypatch):
    """Make ``os.scandir`` raise PermissionError for the registered paths.

    Works regardless of the user running the tests, unlike chmod.
    """
    denied: set[str] = set()
    real_scandir = os.scandir

    def fake_scandir(path="."):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    return denied


@pytest.fixture
def sized_tree(tmp_path):
    """Root with A (10 MiB over ten files) and B (one 5 MiB file)."""
    for i in range(10):
        make_file(tmp_path / "A" / f"part{i}.bin", 1_048_576)
    make_file(tmp_path / "B" / "blob.bin", 5_242_880)
    return tmp_path


@pytest.fixture
def undecodable_dir(tmp_path):
    """Directory whose name is not valid UTF-8 (``caf\\xe9`` in Latin-1)."""
    if sys.platform in ("win32", "darwin"):
        pytest.skip("filesystem requires valid Unicode names")
    raw = os.path.join(os.fsencode(tmp_path), b"caf\xe9")
    os.mkdir(raw)
    make_file(Path(os.fsdecode(raw)) / "data.bin", 2 * 1_048_576)
    return os.fsdecode(raw)
