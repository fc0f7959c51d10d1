"""
Summary: Ports defining the external collaborators of a split run.
Why: Decouple the runner from ffmpeg and taggers so tests can record calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from tracksplit.features.naming import CutRequest, TagRequest


@runtime_checkable
class CutterPort(Protocol):
    """Port for lossless, time-bounded extraction of audio."""

    def cut(self, request: CutRequest) -> None:
        """Produce ``request.destination`` or raise ``CutError``."""
        ...


@runtime_checkable
class TaggerPort(Protocol):
    """Port for embedding metadata into a produced file."""

    def tag(self, request: TagRequest) -> None:
        """Tag ``request.path`` or raise ``TaggingError``."""
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port abstracting destination directory management."""

    def ensure_directory(self, directory: Path) -> Path:
        """Create ``directory`` and its parents unless it already exists."""
        ...


__all__ = ["CutterPort", "FilesystemPort", "TaggerPort"]
