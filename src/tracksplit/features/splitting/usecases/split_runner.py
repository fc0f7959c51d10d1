"""Split run orchestration.

Where: features/splitting/usecases/split_runner.py
What: Validate inputs, plan tracks, then cut and tag each one in order.
Why: Centralize the abort-on-first-failure sequence behind injected ports.
"""

from __future__ import annotations

import time
from typing import final

from tracksplit.features.naming import TrackNaming, build_cut_request, build_tag_request
from tracksplit.features.splitting.domain import SplitRequest, TrackResult
from tracksplit.features.timecodes import check_timecode_order, parse_timecodes_file
from tracksplit.features.tracks import segment_tracks
from tracksplit.platform.logging import logger
from tracksplit.shared.errors import (
    AudioFileNotFoundError,
    CollaboratorError,
    DestinationDirectoryError,
    TimecodesNotFoundError,
)
from tracksplit.shared.track import Track

from .ports import CutterPort, FilesystemPort, TaggerPort


@final
class SplitRunner:
    """Run the split state machine for one recording.

    ``validate -> parse -> order check -> segment -> ensure directory ->
    (cut, tag) per track``. Every failure propagates unchanged; files that
    were already produced stay on disk.
    """

    cutter: CutterPort
    tagger: TaggerPort
    filesystem: FilesystemPort

    def __init__(self, cutter: CutterPort, tagger: TaggerPort, filesystem: FilesystemPort) -> None:
        self.cutter = cutter
        self.tagger = tagger
        self.filesystem = filesystem

    def plan(self, request: SplitRequest) -> list[TrackResult]:
        """Validate inputs and derive every track and its destination.

        Raises:
            AudioFileNotFoundError: If the audio file is missing.
            TimecodesNotFoundError: If the timecodes file is missing.
            TimecodeFormatError: If the timecode list is malformed.
        """
        if not request.audio_file.exists():
            raise AudioFileNotFoundError(request.audio_file)
        if not request.timecodes_file.exists():
            raise TimecodesNotFoundError(request.timecodes_file)

        pairs = parse_timecodes_file(request.timecodes_file)
        check_timecode_order(pairs)
        tracks = segment_tracks(pairs, request.artist, request.album)

        return [
            TrackResult(
                track=track,
                path=TrackNaming.output_path(track, request.audio_file, request.output_root),
                dry_run=request.dry_run,
            )
            for track in tracks
        ]

    def run(self, request: SplitRequest) -> list[TrackResult]:
        """Split ``request.audio_file`` into tagged tracks.

        Returns:
            list[TrackResult]: One entry per track, in ascending number order.

        Raises:
            TrackSplitError: The first failure encountered; later tracks are
                never attempted.
        """
        results = self.plan(request)
        total = len(results)

        if request.dry_run:
            logger.info(
                "Planned %d tracks",
                total,
                extra={
                    "processing_event": "processing.run.plan",
                    "total_tracks": total,
                    "source_path": str(request.audio_file),
                },
            )
            return results

        directory = TrackNaming.album_directory(request.artist, request.album, request.output_root)
        try:
            _ = self.filesystem.ensure_directory(directory)
        except OSError as e:
            raise DestinationDirectoryError(directory, e.strerror or str(e)) from e

        logger.info(
            "Splitting %s into %d tracks",
            request.audio_file,
            total,
            extra={
                "processing_event": "processing.run.start",
                "total_tracks": total,
                "source_path": str(request.audio_file),
            },
        )
        started = time.perf_counter()

        for result in results:
            self._process_track(result.track, request)

        logger.info(
            "Split complete in %.2fs",
            time.perf_counter() - started,
            extra={
                "processing_event": "processing.run.complete",
                "total_tracks": total,
                "source_path": str(request.audio_file),
            },
        )
        return results

    def _process_track(self, track: Track, request: SplitRequest) -> None:
        cut_request = build_cut_request(track, request.audio_file, request.output_root)
        event_extra: dict[str, object] = {
            "sequence": track.number,
            "total_tracks": track.total,
            "target_path": str(cut_request.destination),
        }

        logger.info(
            'processing track "%s"',
            cut_request.destination,
            extra={
                **event_extra,
                "processing_event": "processing.track.start",
                "start": str(track.start),
                "end": str(track.end) if track.end is not None else None,
            },
        )

        try:
            self.cutter.cut(cut_request)
            self.tagger.tag(build_tag_request(track, request.audio_file, request.output_root))
        except CollaboratorError as e:
            logger.debug(
                "Track %d failed: %s",
                track.number,
                e,
                extra={**event_extra, "processing_event": "processing.track.error", "error_message": str(e)},
            )
            raise

        logger.debug(
            "Tagged %s",
            cut_request.destination,
            extra={**event_extra, "processing_event": "processing.track.success"},
        )


__all__ = ["SplitRunner"]
