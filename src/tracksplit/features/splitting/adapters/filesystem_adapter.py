"""Local filesystem adapter for the split runner."""

from __future__ import annotations

from pathlib import Path
from typing import final

from tracksplit.platform.filesystem import ensure_directory


@final
class LocalFilesystemAdapter:
    """Create destination directories on the local disk."""

    def ensure_directory(self, directory: Path) -> Path:
        return ensure_directory(directory)


__all__ = ["LocalFilesystemAdapter"]
