"""ffmpeg-backed implementation of the cutter port."""

from __future__ import annotations

from typing import final

from tracksplit.features.naming import CutRequest
from tracksplit.platform.process import ProcessFailure, run_command
from tracksplit.shared.errors import CollaboratorNotFoundError, CutError


@final
class FfmpegCutter:
    """Cut tracks with ``ffmpeg`` using stream copy (no re-encode)."""

    binary: str

    def __init__(self, binary: str = "ffmpeg") -> None:
        self.binary = binary

    def build_args(self, request: CutRequest) -> list[str]:
        """Return ffmpeg arguments, without the executable, for ``request``."""

        args = ["-nostdin", "-y", "-loglevel", "error", "-ss", str(request.start)]
        if request.end is not None:
            args += ["-to", str(request.end)]
        args += [
            "-i",
            str(request.source),
            "-vn",
            "-c",
            "copy",
            "-f",
            request.output_format,
            str(request.destination),
        ]
        return args

    def cut(self, request: CutRequest) -> None:
        try:
            run_command([self.binary, *self.build_args(request)])
        except FileNotFoundError as e:
            raise CollaboratorNotFoundError(self.binary) from e
        except ProcessFailure as e:
            raise CutError(e.message) from e


__all__ = ["FfmpegCutter"]
