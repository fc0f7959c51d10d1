"""Timecode list parsing.

Where: features/timecodes/usecases/parser.py
What: Turn ``HH:MM:SS Title`` lines into ordered, validated pairs.
Why: Reject malformed input before any directory or process is touched.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from tracksplit.features.timecodes.domain import TimecodePair
from tracksplit.platform.logging import logger
from tracksplit.shared.errors import (
    InvalidLineFormatError,
    NoTimecodesFoundError,
    TimecodesNotFoundError,
    TimecodesUnreadableError,
    TooManyTracksError,
)
from tracksplit.shared.timecode import Timecode
from tracksplit.shared.track import MAX_TRACKS

_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"\s+")
_BOM: Final[str] = "\ufeff"


def parse_line(line: str, line_number: int) -> TimecodePair:
    """Parse a single non-blank line.

    The line is split at the first run of whitespace: the left part is the
    time token, the right part (internal whitespace kept) is the title.

    Raises:
        InvalidLineFormatError: If the line has no title.
        InvalidTimecodeError: If the time token is not ``HH:MM:SS``.
    """
    parts = _SEPARATOR.split(line.strip(), maxsplit=1)
    if len(parts) < 2:
        raise InvalidLineFormatError(line, line_number)

    token, title = parts
    title = title.strip()
    if not title:
        raise InvalidLineFormatError(line, line_number)

    return TimecodePair(time=Timecode.parse(token, line_number), title=title, line_number=line_number)


def parse_timecodes(lines: Iterable[str]) -> list[TimecodePair]:
    """Parse timecode lines, skipping blank ones.

    Args:
        lines: Raw lines, with or without trailing newlines.

    Returns:
        list[TimecodePair]: Pairs in input order.

    Raises:
        TimecodeFormatError: On the first malformed line, when no entries are
            found, or when more than ``MAX_TRACKS`` entries are found.
    """
    pairs: list[TimecodePair] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line_number == 1:
            line = line.removeprefix(_BOM)
        if not line.strip():
            continue
        pairs.append(parse_line(line, line_number))

    if not pairs:
        raise NoTimecodesFoundError()

    if len(pairs) > MAX_TRACKS:
        raise TooManyTracksError(len(pairs))

    return pairs


def parse_timecodes_file(path: Path) -> list[TimecodePair]:
    """Read and parse a UTF-8 timecodes file.

    Raises:
        TimecodesNotFoundError: If ``path`` does not exist.
        TimecodesUnreadableError: If ``path`` cannot be opened or decoded.
        TimecodeFormatError: If the content is malformed.
    """
    if not path.exists():
        raise TimecodesNotFoundError(path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TimecodesUnreadableError(path, str(e)) from e

    pairs = parse_timecodes(content.split("\n"))
    logger.debug("Parsed %d timecodes from %s", len(pairs), path)
    return pairs


__all__ = ["parse_line", "parse_timecodes", "parse_timecodes_file"]
