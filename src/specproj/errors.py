"""Error types raised while navigating a project tree."""

from __future__ import annotations


class NotFoundError(FileNotFoundError):
    """A project root, directory or file could not be located.

    ``str(err)`` is the bare message, e.g. ``Failed to find project directory``.
    """
