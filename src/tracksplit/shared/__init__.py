# Where: tracksplit.shared.__init__
# What: Provide a concise import surface for shared value types and errors.
# Why: Encourage consistent reuse of shared records across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import TrackSplitError
from .timecode import Timecode
from .track import MAX_TRACKS, Track

__all__ = ["MAX_TRACKS", "Timecode", "Track", "TrackSplitError"]
