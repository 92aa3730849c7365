"""Filesystem access behind a small protocol so callers can swap in an in-memory tree."""

from __future__ import annotations

import errno
import io
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Protocol, TextIO, runtime_checkable

# Called with each error hit while walking a directory tree
WalkErrorHandler = Callable[[OSError], None]

# Bytes that are not UTF-8 (Latin-1 properties files) round-trip as surrogates
_ERRORS = "surrogateescape"


@runtime_checkable
class FileSystem(Protocol):
    """Operations the project helpers need from a filesystem."""

    def getcwd(self) -> Path:
        """Return the current working directory as an absolute path."""
        ...

    def absolute(self, path: str | Path) -> Path:
        """Make ``path`` absolute against the working directory and normalize it."""
        ...

    def exists(self, path: str | Path) -> bool: ...

    def is_dir(self, path: str | Path) -> bool: ...

    def walk_files(
        self, top: str | Path, onerror: WalkErrorHandler | None = None
    ) -> Iterator[Path]:
        """Yield every file below ``top``, joined onto ``top`` as given."""
        ...

    def read_text(self, path: str | Path) -> str: ...

    def write_text(self, path: str | Path, content: str) -> None: ...

    def open_append(self, path: str | Path) -> ContextManager[TextIO]:
        """Open ``path`` for appending text, creating the file if absent."""
        ...


class LocalFileSystem:
    """The real disk."""

    def getcwd(self) -> Path:
        return Path.cwd()

    def absolute(self, path: str | Path) -> Path:
        return Path(os.path.abspath(path))

    def exists(self, path: str | Path) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str | Path) -> bool:
        return os.path.isdir(path)

    def walk_files(
        self, top: str | Path, onerror: WalkErrorHandler | None = None
    ) -> Iterator[Path]:
        for dirpath, _dirnames, filenames in os.walk(top, onerror=onerror):
            for name in filenames:
                yield Path(dirpath) / name

    def read_text(self, path: str | Path) -> str:
        return Path(path).read_text(encoding="utf-8", errors=_ERRORS)

    def write_text(self, path: str | Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8", errors=_ERRORS)

    def open_append(self, path: str | Path) -> ContextManager[TextIO]:
        return Path(path).open("a", encoding="utf-8", errors=_ERRORS)


class MemoryFileSystem:
    """In-memory directory tree with its own working directory.

    Paths are kept absolute and normalized. Files hold text only.
    """

    def __init__(self, cwd: str | Path = "/") -> None:
        self.files: dict[Path, str] = {}
        self.dirs: set[Path] = set()
        self._cwd = Path(os.path.normpath(cwd))
        self.makedirs(self._cwd)

    # ── Tree setup ────────────────────────────────────────────

    def makedirs(self, path: str | Path) -> Path:
        """Create ``path`` and any missing parents. Idempotent."""
        target = self.absolute(path)
        missing: list[Path] = []
        p = target
        while p not in self.dirs:
            if p in self.files:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(p))
            missing.append(p)
            if p.parent == p:
                break
            p = p.parent
        # Nothing is added until the whole chain is known to be free of files
        self.dirs.update(missing)
        return target

    def add_file(self, path: str | Path, content: str = "") -> Path:
        """Create a file (and its parent directories) holding ``content``."""
        p = self.absolute(path)
        self.makedirs(p.parent)
        self.write_text(p, content)
        return p

    def chdir(self, path: str | Path) -> None:
        p = self.absolute(path)
        if p not in self.dirs:
            raise self._missing(p)
        self._cwd = p

    # ── FileSystem protocol ───────────────────────────────────

    def getcwd(self) -> Path:
        return self._cwd

    def absolute(self, path: str | Path) -> Path:
        p = Path(path)
        if not p.is_absolute():
            p = self._cwd / p
        return Path(os.path.normpath(p))

    def exists(self, path: str | Path) -> bool:
        p = self.absolute(path)
        return p in self.files or p in self.dirs

    def is_dir(self, path: str | Path) -> bool:
        return self.absolute(path) in self.dirs

    def walk_files(
        self, top: str | Path, onerror: WalkErrorHandler | None = None
    ) -> Iterator[Path]:
        base = self.absolute(top)
        if base not in self.dirs:
            if onerror is not None:
                onerror(self._missing(base))
            return
        for p in sorted(self.files):
            if p.is_relative_to(base):
                yield Path(top) / p.relative_to(base)

    def read_text(self, path: str | Path) -> str:
        p = self.absolute(path)
        if p in self.dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(p))
        if p not in self.files:
            raise self._missing(p)
        return self.files[p]

    def write_text(self, path: str | Path, content: str) -> None:
        p = self._writable(path)
        self.files[p] = content

    @contextmanager
    def open_append(self, path: str | Path) -> Iterator[TextIO]:
        p = self._writable(path)
        self.files.setdefault(p, "")
        buf = io.StringIO()
        try:
            yield buf
        finally:
            self.files[p] += buf.getvalue()

    # ── Helpers ───────────────────────────────────────────────

    def _writable(self, path: str | Path) -> Path:
        p = self.absolute(path)
        if p in self.dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(p))
        if p.parent not in self.dirs:
            raise self._missing(p.parent)
        return p

    @staticmethod
    def _missing(p: Path) -> FileNotFoundError:
        return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(p))
