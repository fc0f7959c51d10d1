"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from tracksplit.features.splitting import SplitRequest, TaggerKind


@final
@dataclass(slots=True)
class SplitArgs:
    """Validated command line arguments for a split run."""

    audio_file: Path
    timecodes_file: Path
    artist: str
    album: str
    output_root: Path
    dry_run: bool
    verbose: bool
    quiet: bool
    tagger: TaggerKind | None

    def to_request(self) -> SplitRequest:
        """Build the run configuration passed into the core."""
        return SplitRequest(
            audio_file=self.audio_file,
            timecodes_file=self.timecodes_file,
            artist=self.artist,
            album=self.album,
            output_root=self.output_root,
            dry_run=self.dry_run,
        )


__all__ = ["SplitArgs"]
