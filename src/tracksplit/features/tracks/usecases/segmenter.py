"""Track segmentation.

Where: features/tracks/usecases/segmenter.py
What: Convert ordered timecode pairs into contiguous Track records.
Why: Each track ends where the next begins; the last runs to end of file.
"""

from __future__ import annotations

from collections.abc import Sequence

from tracksplit.features.timecodes.domain import TimecodePair
from tracksplit.shared.track import Track


def segment_tracks(pairs: Sequence[TimecodePair], artist: str, album: str) -> list[Track]:
    """Build one Track per pair in a single pass.

    No sorting, overlap detection or gap filling happens here.

    Args:
        pairs: Parsed pairs in file order.
        artist: Album artist copied onto every track.
        album: Album name copied onto every track.

    Returns:
        list[Track]: Tracks numbered from 1, each sharing ``total``.
    """
    total = len(pairs)
    tracks: list[Track] = []
    for index, pair in enumerate(pairs):
        end = pairs[index + 1].time if index + 1 < total else None
        tracks.append(
            Track(
                number=index + 1,
                total=total,
                title=pair.title,
                start=pair.time,
                end=end,
                artist=artist,
                album=album,
            )
        )
    return tracks


__all__ = ["segment_tracks"]
