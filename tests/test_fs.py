"""Tests for the in-memory filesystem used in place of the real disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from specproj.fs import FileSystem, LocalFileSystem, MemoryFileSystem


class TestProtocol:
    def test_implementations_satisfy_protocol(self):
        assert isinstance(LocalFileSystem(), FileSystem)
        assert isinstance(MemoryFileSystem(), FileSystem)


class TestMemoryFileSystem:
    def test_absolute_normalizes(self):
        fs = MemoryFileSystem(cwd="/work/a")
        assert fs.absolute("../b/./c") == Path("/work/b/c")
        assert fs.absolute("/x/y/") == Path("/x/y")

    def test_makedirs_creates_parents(self):
        fs = MemoryFileSystem()
        fs.makedirs("/a/b/c")
        assert fs.is_dir("/a") and fs.is_dir("/a/b") and fs.is_dir("/a/b/c")

    def test_add_file(self):
        fs = MemoryFileSystem()
        fs.add_file("/a/b.txt", "hello")
        assert fs.exists("/a/b.txt")
        assert not fs.is_dir("/a/b.txt")
        assert fs.read_text("/a/b.txt") == "hello"

    def test_chdir_missing(self):
        fs = MemoryFileSystem()
        with pytest.raises(FileNotFoundError):
            fs.chdir("/nowhere")

    def test_read_errors(self):
        fs = MemoryFileSystem()
        fs.makedirs("/d")
        with pytest.raises(FileNotFoundError):
            fs.read_text("/d/missing")
        with pytest.raises(IsADirectoryError):
            fs.read_text("/d")

    def test_walk_reports_missing_top(self):
        errors: list[OSError] = []
        assert list(MemoryFileSystem().walk_files("/nope", onerror=errors.append)) == []
        assert len(errors) == 1

    def test_append_commits_on_error(self):
        fs = MemoryFileSystem()
        with pytest.raises(RuntimeError):
            with fs.open_append("/log.txt") as f:
                f.write("partial")
                raise RuntimeError("boom")
        assert fs.read_text("/log.txt") == "partial"

    def test_makedirs_under_file_leaves_tree_unchanged(self):
        fs = MemoryFileSystem()
        fs.add_file("/a")
        with pytest.raises(NotADirectoryError):
            fs.makedirs("/a/b/c")
        assert not fs.exists("/a/b")
        assert not fs.exists("/a/b/c")
        assert not fs.is_dir("/a")


class TestLocalFileSystem:
    def test_walk_files(self, tmp_path: Path):
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "x.txt").write_text("x")
        (tmp_path / "y.txt").write_text("y")
        found = sorted(LocalFileSystem().walk_files(tmp_path))
        assert found == [tmp_path / "a" / "x.txt", tmp_path / "y.txt"]

    def test_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert LocalFileSystem().absolute("a/../b") == tmp_path / "b"
