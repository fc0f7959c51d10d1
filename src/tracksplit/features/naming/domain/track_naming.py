"""Track file naming rules.

Where: features/naming/domain/track_naming.py
What: Compute ``NN - Title.ext`` file names and ``Artist/Album`` directories.
Why: Padding depends on the run's track count, not on any single track.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, final

from tracksplit.shared.track import Track


@final
class TrackNaming:
    """Derive output locations for tracks."""

    # Tracks beyond this count need a third digit
    TWO_DIGIT_LIMIT: ClassVar[int] = 99
    PATH_SEPARATOR_REPLACEMENT: ClassVar[str] = "-"

    @classmethod
    def number_width(cls, total: int) -> int:
        return 3 if total > cls.TWO_DIGIT_LIMIT else 2

    @classmethod
    def format_number(cls, number: int, total: int) -> str:
        """Zero-pad ``number`` to the width implied by ``total``."""
        return str(number).zfill(cls.number_width(total))

    @classmethod
    def path_segment(cls, value: str) -> str:
        """Make ``value`` usable as one path segment.

        Only separators are replaced; all other characters pass through.
        """
        return value.replace("/", cls.PATH_SEPARATOR_REPLACEMENT).replace(
            "\\", cls.PATH_SEPARATOR_REPLACEMENT
        )

    @classmethod
    def file_name(cls, track: Track, extension: str) -> str:
        """Return ``<padded-number> - <title><extension>``."""
        number = cls.format_number(track.number, track.total)
        return f"{number} - {cls.path_segment(track.title)}{extension}"

    @classmethod
    def album_directory(cls, artist: str, album: str, root: Path | None = None) -> Path:
        """Return ``<root>/<artist>/<album>``; ``root`` defaults to a relative path."""
        base = root if root is not None else Path()
        return base / cls.path_segment(artist) / cls.path_segment(album)

    @classmethod
    def output_path(cls, track: Track, source: Path, root: Path | None = None) -> Path:
        """Return the destination path of ``track`` cut from ``source``.

        The extension, including its leading dot, is copied from ``source``.
        """
        directory = cls.album_directory(track.artist, track.album, root)
        return directory / cls.file_name(track, source.suffix)


__all__ = ["TrackNaming"]
