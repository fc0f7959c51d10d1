"""
Summary: Mapping from output file extensions to ffmpeg muxer names.
Why: Stream copy needs an explicit muxer that matches the copied container.
"""

from __future__ import annotations

from typing import Final

DEFAULT_FORMAT: Final[str] = "mp3"

# ffmpeg's muxer names differ from the extension for several containers
_EXTENSION_FORMATS: Final[dict[str, str]] = {
    ".mp3": "mp3",
    ".flac": "flac",
    ".m4a": "mp4",
    ".m4b": "mp4",
    ".mp4": "mp4",
    ".ogg": "ogg",
    ".oga": "ogg",
    ".opus": "opus",
    ".wav": "wav",
    ".aac": "adts",
    ".wma": "asf",
    ".aiff": "aiff",
    ".aif": "aiff",
}


def output_format_for(extension: str) -> str:
    """Return the ffmpeg ``-f`` value for a file extension such as ``".flac"``."""

    normalized = extension.lower()
    if normalized in _EXTENSION_FORMATS:
        return _EXTENSION_FORMATS[normalized]
    stripped = normalized.lstrip(".")
    return stripped or DEFAULT_FORMAT


__all__ = ["DEFAULT_FORMAT", "output_format_for"]
