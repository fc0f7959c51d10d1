"""eyeD3-backed implementation of the tagger port."""

from __future__ import annotations

from typing import final

from tracksplit.features.naming import TagRequest
from tracksplit.platform.process import ProcessFailure, run_command
from tracksplit.shared.errors import CollaboratorNotFoundError, TaggingError


@final
class Eyed3Tagger:
    """Write ID3 tags by running the ``eyeD3`` command line tool.

    Each option is one argv element, so values reach eyeD3 verbatim without
    any shell quoting.
    """

    binary: str

    def __init__(self, binary: str = "eyeD3") -> None:
        self.binary = binary

    def build_args(self, request: TagRequest) -> list[str]:
        return [
            f"--artist={request.artist}",
            f"--album-artist={request.album_artist}",
            f"--album={request.album}",
            f"--title={request.title}",
            f"--track={request.track_number}",
            f"--track-total={request.track_total}",
            str(request.path),
        ]

    def tag(self, request: TagRequest) -> None:
        try:
            run_command([self.binary, *self.build_args(request)])
        except FileNotFoundError as e:
            raise CollaboratorNotFoundError(self.binary) from e
        except ProcessFailure as e:
            raise TaggingError(e.message) from e


__all__ = ["Eyed3Tagger"]
