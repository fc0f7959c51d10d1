# Where: tracksplit.shared.timecode
# What: Validated time-of-day value used for track boundaries.
# Why: Parse once, compare structurally, and pass the original text to ffmpeg.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Self

from .errors import InvalidTimecodeError


@dataclass(frozen=True, slots=True, order=True)
class Timecode:
    """A 24-hour ``HH:MM:SS`` offset into the source recording."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")

    total_seconds: int
    text: str = field(compare=False)

    @classmethod
    def parse(cls, token: str, line_number: int | None = None) -> Self:
        """Parse ``token`` after trimming surrounding whitespace.

        Args:
            token: Raw time token, e.g. ``"00:03:15"``.
            line_number: Optional 1-based source line used in error messages.

        Returns:
            Timecode: The validated value.

        Raises:
            InvalidTimecodeError: If the token is not a valid time of day.
        """
        stripped = token.strip()
        match = cls.PATTERN.fullmatch(stripped)
        if match is None:
            raise InvalidTimecodeError(token, line_number)

        hours, minutes, seconds = (int(part) for part in match.groups())
        if hours > 23 or minutes > 59 or seconds > 59:
            raise InvalidTimecodeError(token, line_number)

        return cls(total_seconds=hours * 3600 + minutes * 60 + seconds, text=stripped)

    def __str__(self) -> str:
        return self.text


__all__ = ["Timecode"]
