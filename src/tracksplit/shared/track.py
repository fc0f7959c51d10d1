# Where: tracksplit.shared.track
# What: Canonical Track record shared by segmenting, naming and running.
# Why: Keep one immutable representation of a segment across features.

from dataclasses import dataclass

from .timecode import Timecode

MAX_TRACKS = 999


@dataclass(frozen=True, slots=True)
class Track:
    """One segment of the source recording."""

    number: int
    total: int
    title: str
    start: Timecode
    end: Timecode | None
    artist: str
    album: str

    @property
    def is_last(self) -> bool:
        """Whether this track runs to the end of the source file."""
        return self.end is None


__all__ = ["MAX_TRACKS", "Track"]
