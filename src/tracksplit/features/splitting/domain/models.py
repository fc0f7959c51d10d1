"""Data structures that describe a split run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from tracksplit.shared.track import Track


class TaggerKind(str, Enum):
    """Represent which backend embeds metadata into produced tracks."""

    EYED3 = "eyed3"
    MUTAGEN = "mutagen"

    @staticmethod
    def from_user_input(value: str) -> "TaggerKind":
        """Translate raw CLI or config input into the matching backend."""

        normalized = value.strip().lower()
        for kind in TaggerKind:
            if kind.value == normalized:
                return kind
        valid: Final[str] = ", ".join(k.value for k in TaggerKind)
        msg = f"Unsupported tagger '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SplitRequest:
    """Inputs required to split one recording.

    Attributes:
        audio_file: Source recording.
        timecodes_file: ``HH:MM:SS Title`` list.
        artist: Album artist for every track.
        album: Album name for every track.
        output_root: Directory under which ``Artist/Album`` is created.
        dry_run: Plan only; create nothing and invoke no collaborator.
    """

    audio_file: Path
    timecodes_file: Path
    artist: str
    album: str
    output_root: Path = field(default_factory=Path)
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class TrackResult:
    """A track together with the file it was (or would be) written to."""

    track: Track
    path: Path
    dry_run: bool = False


__all__ = ["SplitRequest", "TaggerKind", "TrackResult"]
