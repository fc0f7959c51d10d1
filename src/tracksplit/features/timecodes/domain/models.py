"""Data structures produced by timecode list parsing."""

from __future__ import annotations

from dataclasses import dataclass

from tracksplit.shared.timecode import Timecode


@dataclass(frozen=True, slots=True)
class TimecodePair:
    """One ``HH:MM:SS Title`` entry, in file order."""

    time: Timecode
    title: str
    line_number: int = 0


__all__ = ["TimecodePair"]
