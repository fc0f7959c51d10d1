"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it.

    Existing directories are accepted as-is so repeated runs stay idempotent.

    Raises:
        NotADirectoryError: If the path exists but is not a directory.
        OSError: If the directory cannot be created.
    """

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


__all__ = ["ensure_directory"]
