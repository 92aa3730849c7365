"""Resolve well-known directories and files inside a project."""

from __future__ import annotations

from pathlib import Path

from specproj.config import ProjectLayout
from specproj.errors import NotFoundError
from specproj.fs import FileSystem, LocalFileSystem
from specproj.locator import ProjectLocator


class PathResolver:
    """Join names onto the discovered project root and check they exist."""

    def __init__(self, fs: FileSystem | None = None, layout: ProjectLayout | None = None) -> None:
        self.fs = fs or LocalFileSystem()
        self.layout = layout or ProjectLayout()
        self.locator = ProjectLocator(self.fs, self.layout)

    def _root(self, start_path: str | Path = "") -> Path:
        if start_path:
            return self.locator.get_project_root_from_spec_path(start_path)
        return self.locator.get_project_root()

    def get_dir_in_project(self, dir_name: str, start_path: str | Path = "") -> Path:
        """Return ``<root>/<dir_name>``, raising NotFoundError when it does not exist.

        The root is found from ``start_path`` when given, else from the working directory.
        """
        path = self._root(start_path) / dir_name
        if not self.fs.exists(path):
            raise NotFoundError(f"Could not find {dir_name} directory. {path} does not exist")
        return path

    def get_default_properties_file(self) -> Path:
        """Return ``<root>/env/default/default.properties`` (names from the layout)."""
        relative = self.layout.default_properties_path
        path = self._root() / relative
        if not self.fs.exists(path):
            raise NotFoundError(f"Could not find {relative} file. {path} does not exist")
        return path

    def get_specs_dir(self, start_path: str | Path = "") -> Path:
        return self.get_dir_in_project(self.layout.specs_dir, start_path)

    def get_concepts_dir(self, start_path: str | Path = "") -> Path:
        return self.get_dir_in_project(self.layout.concepts_dir, start_path)

    def sub_directory_exists(self, root: str | Path, name: str) -> bool:
        return self.fs.exists(Path(root) / name)


def get_dir_in_project(dir_name: str, start_path: str | Path = "") -> Path:
    return PathResolver().get_dir_in_project(dir_name, start_path)


def get_default_properties_file() -> Path:
    return PathResolver().get_default_properties_file()


def sub_directory_exists(root: str | Path, name: str) -> bool:
    return PathResolver().sub_directory_exists(root, name)
