# Where: tracksplit.shared.errors
# What: Exception hierarchy raised by parsing, planning and collaborator layers.
# Why: Let the CLI surface any failure as a single line without inspecting types.

"""Errors raised while splitting a recording into tracks."""

from __future__ import annotations

from pathlib import Path


class TrackSplitError(Exception):
    """Base error for every failure that aborts a split run."""


class AudioFileNotFoundError(TrackSplitError, FileNotFoundError):
    """Raised when the source audio file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"audio file not found: {path}")
        self.path = path


class TimecodesNotFoundError(TrackSplitError, FileNotFoundError):
    """Raised when the timecodes file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"timecodes file not found: {path}")
        self.path = path


class TimecodesUnreadableError(TrackSplitError):
    """Raised when the timecodes file exists but cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read timecodes file {path}: {reason}")
        self.path = path


class TimecodeFormatError(TrackSplitError):
    """Base error for malformed timecode lists."""


class InvalidLineFormatError(TimecodeFormatError):
    """Raised when a line does not hold both a time and a title."""

    def __init__(self, line: str, line_number: int) -> None:
        super().__init__(f"invalid format on line {line_number}: {line!r}")
        self.line = line
        self.line_number = line_number


class InvalidTimecodeError(TimecodeFormatError):
    """Raised when a time token is not a 24-hour ``HH:MM:SS`` value."""

    def __init__(self, token: str, line_number: int | None = None) -> None:
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"invalid timecode{location}: {token!r}")
        self.token = token
        self.line_number = line_number


class NoTimecodesFoundError(TimecodeFormatError):
    """Raised when the list holds no usable entries."""

    def __init__(self) -> None:
        super().__init__("no timecodes found")


class TooManyTracksError(TimecodeFormatError):
    """Raised when the list exceeds the three-digit track number ceiling."""

    def __init__(self, count: int) -> None:
        super().__init__(f"too many tracks: {count}")
        self.count = count


class TimecodeOrderError(TimecodeFormatError):
    """Raised when a timecode does not come strictly after its predecessor."""

    def __init__(self, previous: str, current: str, title: str) -> None:
        super().__init__(
            f"timecode {current} for {title!r} is not after the previous timecode {previous}"
        )
        self.previous = previous
        self.current = current
        self.title = title


class DestinationDirectoryError(TrackSplitError):
    """Raised when the ``Artist/Album`` directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot create directory {path}: {reason}")
        self.path = path


class CollaboratorError(TrackSplitError):
    """Raised when an external cut or tag step fails.

    The message is the collaborator's own diagnostic output, unchanged.
    """


class CutError(CollaboratorError):
    """Raised when cutting a track fails."""


class TaggingError(CollaboratorError):
    """Raised when tagging a produced track fails."""


class CollaboratorNotFoundError(CollaboratorError):
    """Raised when an external executable cannot be located."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"executable not found: {executable}")
        self.executable = executable


__all__ = [
    "TrackSplitError",
    "AudioFileNotFoundError",
    "TimecodesNotFoundError",
    "TimecodesUnreadableError",
    "TimecodeFormatError",
    "InvalidLineFormatError",
    "InvalidTimecodeError",
    "NoTimecodesFoundError",
    "TooManyTracksError",
    "TimecodeOrderError",
    "DestinationDirectoryError",
    "CollaboratorError",
    "CutError",
    "TaggingError",
    "CollaboratorNotFoundError",
]
