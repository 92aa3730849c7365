"""Property entries and the text files they are appended to.

A property file is a sequence of two-line records::

    # <comment>
    <name> = <default value>

Records are only ever appended; readers must tolerate records added later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from specproj.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


@dataclass(frozen=True)
class Property:
    """A named value with the comment written above it."""

    name: str
    comment: str
    default_value: str

    def __str__(self) -> str:
        return f"# {self.comment}\n{self.name} = {self.default_value}\n"


class PropertyAppender:
    """Append property records to files and read them back."""

    def __init__(self, fs: FileSystem | None = None) -> None:
        self.fs = fs or LocalFileSystem()

    def append_properties(self, file_path: str | Path, *properties: Property) -> None:
        """Append each property in the order given. Creates the file, never its directory."""
        with self.fs.open_append(file_path) as f:
            for prop in properties:
                f.write(str(prop))
        logger.info("Appended %d properties to %s", len(properties), file_path)

    def read_file_contents(self, file_path: str | Path) -> str:
        return self.fs.read_text(file_path)

    def save_file(self, file_path: str | Path, content: str, backup: bool = False) -> None:
        """Overwrite ``file_path``, optionally keeping the old contents in ``<file>.bak``."""
        if backup and self.fs.exists(file_path):
            backup_path = f"{file_path}{BACKUP_SUFFIX}"
            self.fs.write_text(backup_path, self.fs.read_text(file_path))
            logger.info("Backed up %s to %s", file_path, backup_path)
        self.fs.write_text(file_path, content)
        logger.info("Saved %s (%d chars)", file_path, len(content))


def append_properties(file_path: str | Path, *properties: Property) -> None:
    PropertyAppender().append_properties(file_path, *properties)


def read_file_contents(file_path: str | Path) -> str:
    return PropertyAppender().read_file_contents(file_path)


def save_file(file_path: str | Path, content: str, backup: bool = False) -> None:
    PropertyAppender().save_file(file_path, content, backup)
