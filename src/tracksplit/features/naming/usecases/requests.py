"""Cut and tag request derivation.

Where: features/naming/usecases/requests.py
What: Project a Track onto the inputs needed by the cut and tag collaborators.
Why: Keep collaborators free of naming rules and the runner free of argv details.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tracksplit.features.naming.domain import TrackNaming, output_format_for
from tracksplit.shared.timecode import Timecode
from tracksplit.shared.track import Track


@dataclass(frozen=True, slots=True)
class CutRequest:
    """A lossless, time-bounded extraction of ``source`` into ``destination``.

    Attributes:
        source: Recording to cut from.
        start: Inclusive start boundary.
        end: Exclusive end boundary; ``None`` reads to end of stream.
        destination: File to create or overwrite.
        output_format: ffmpeg muxer implied by the destination extension.
    """

    source: Path
    start: Timecode
    end: Timecode | None
    destination: Path
    output_format: str


@dataclass(frozen=True, slots=True)
class TagRequest:
    """Metadata to embed into an already produced track file."""

    path: Path
    artist: str
    album_artist: str
    album: str
    title: str
    track_number: int
    track_total: int


def build_cut_request(track: Track, source: Path, root: Path | None = None) -> CutRequest:
    destination = TrackNaming.output_path(track, source, root)
    return CutRequest(
        source=source,
        start=track.start,
        end=track.end,
        destination=destination,
        output_format=output_format_for(destination.suffix),
    )


def build_tag_request(track: Track, source: Path, root: Path | None = None) -> TagRequest:
    """Build the tag request; string values are passed through unescaped."""
    return TagRequest(
        path=TrackNaming.output_path(track, source, root),
        artist=track.artist,
        album_artist=track.artist,
        album=track.album,
        title=track.title,
        track_number=track.number,
        track_total=track.total,
    )


__all__ = ["CutRequest", "TagRequest", "build_cut_request", "build_tag_request"]
