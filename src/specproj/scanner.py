"""Best-effort recursive file listing and existence checks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from specproj.config import ProjectLayout
from specproj.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

FilePredicate = Callable[[Path], bool]


class FileScanner:
    """Walk directory trees collecting files that satisfy a predicate.

    Errors while walking (missing directory, permission denied) are logged
    and skipped, so a scan always returns a list.
    """

    def __init__(self, fs: FileSystem | None = None, layout: ProjectLayout | None = None) -> None:
        self.fs = fs or LocalFileSystem()
        self.layout = layout or ProjectLayout()

    def find_files_in_dir(self, dir_path: str | Path, predicate: FilePredicate) -> list[Path]:
        """Return every file below ``dir_path`` for which ``predicate`` is true, in walk order."""
        return [
            path
            for path in self.fs.walk_files(dir_path, onerror=self._skip)
            if predicate(path)
        ]

    def file_exists(self, path: str | Path) -> bool:
        """True for files and directories alike."""
        return self.fs.exists(path)

    def dir_exists(self, path: str | Path) -> bool:
        return self.fs.is_dir(path)

    def is_spec_file(self, path: str | Path) -> bool:
        return Path(path).suffix == self.layout.spec_extension

    def is_concept_file(self, path: str | Path) -> bool:
        return Path(path).suffix == self.layout.concept_extension

    def find_spec_files(self, dir_path: str | Path) -> list[Path]:
        return self.find_files_in_dir(dir_path, self.is_spec_file)

    def find_concept_files(self, dir_path: str | Path) -> list[Path]:
        return self.find_files_in_dir(dir_path, self.is_concept_file)

    @staticmethod
    def _skip(err: OSError) -> None:
        logger.debug("Skipping unreadable path during scan: %s", err)


def find_files_in_dir(dir_path: str | Path, predicate: FilePredicate) -> list[Path]:
    return FileScanner().find_files_in_dir(dir_path, predicate)


def file_exists(path: str | Path) -> bool:
    return FileScanner().file_exists(path)


def dir_exists(path: str | Path) -> bool:
    return FileScanner().dir_exists(path)
