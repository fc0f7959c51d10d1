# Path: `src/tracksplit/features/timecodes/__init__.py`
# Summary: Export timecode parsing domain and use case symbols.
# Why: Provide a stable import surface for the runner and tests.

from .domain import TimecodePair
from .usecases import check_timecode_order, parse_line, parse_timecodes, parse_timecodes_file

__all__ = [
    "TimecodePair",
    "check_timecode_order",
    "parse_line",
    "parse_timecodes",
    "parse_timecodes_file",
]
