"""Find a project's root by walking upward until the manifest marker is found."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from specproj.config import ProjectLayout
from specproj.errors import NotFoundError
from specproj.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Failed to find project directory"


def ascend(start: Path) -> Iterator[Path]:
    """Yield ``start`` and then each ancestor, ending with the filesystem root.

    Stops at the fixed point where a directory is its own parent.
    """
    current = start
    while True:
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent


class ProjectLocator:
    """Locate the project root containing the manifest marker file.

    Nothing is cached: every call walks the filesystem again.
    """

    def __init__(self, fs: FileSystem | None = None, layout: ProjectLayout | None = None) -> None:
        self.fs = fs or LocalFileSystem()
        self.layout = layout or ProjectLayout()

    def get_project_root(self) -> Path:
        """Search upward from the working directory."""
        return self._find_manifest(self.fs.getcwd())

    def get_project_root_from_spec_path(self, spec_path: str | Path) -> Path:
        """Search upward from the directory containing ``spec_path``.

        A trailing separator means ``spec_path`` names that directory itself.
        """
        directory = os.path.dirname(str(spec_path))
        return self._find_manifest(self.fs.absolute(directory or "."))

    def _find_manifest(self, start: Path) -> Path:
        for candidate in ascend(start):
            if self.fs.exists(candidate / self.layout.manifest_file):
                logger.debug("Found project root %s (searched from %s)", candidate, start)
                return candidate
        raise NotFoundError(PROJECT_NOT_FOUND)


def get_project_root() -> Path:
    return ProjectLocator().get_project_root()


def get_project_root_from_spec_path(spec_path: str | Path) -> Path:
    return ProjectLocator().get_project_root_from_spec_path(spec_path)
