"""
Summary: Ordering validation for parsed timecodes.
Why: Reject lists whose boundaries would produce empty or negative tracks.
"""

from __future__ import annotations

from collections.abc import Sequence

from tracksplit.features.timecodes.domain import TimecodePair
from tracksplit.shared.errors import TimecodeOrderError


def check_timecode_order(pairs: Sequence[TimecodePair]) -> None:
    """Ensure every timecode is strictly later than the one before it.

    Out-of-order or duplicate timecodes would yield negative or zero-length
    segments.

    Raises:
        TimecodeOrderError: Naming the first offending entry.
    """
    for previous, current in zip(pairs, pairs[1:]):
        if current.time <= previous.time:
            raise TimecodeOrderError(str(previous.time), str(current.time), current.title)


__all__ = ["check_timecode_order"]
