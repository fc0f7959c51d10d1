"""Tests for the split run orchestration."""

from collections.abc import Callable
from pathlib import Path

import pytest

from fakes import RecordingCollaborator, RecordingFilesystem
from tracksplit.features.naming import CutRequest, TagRequest
from tracksplit.features.splitting import LocalFilesystemAdapter, SplitRequest, SplitRunner
from tracksplit.shared.errors import (
    AudioFileNotFoundError,
    CutError,
    DestinationDirectoryError,
    InvalidTimecodeError,
    TaggingError,
    TimecodeOrderError,
    TimecodesNotFoundError,
    TooManyTracksError,
)

ROUND_TRIP = "00:00:00 Intro\n00:03:15 Track Two\n"


@pytest.fixture
def filesystem() -> RecordingFilesystem:
    return RecordingFilesystem()


@pytest.fixture
def runner(collaborator: RecordingCollaborator, filesystem: RecordingFilesystem) -> SplitRunner:
    return SplitRunner(cutter=collaborator, tagger=collaborator, filesystem=filesystem)


def _request(audio_file: Path, timecodes: Path, **overrides: object) -> SplitRequest:
    values: dict[str, object] = {
        "audio_file": audio_file,
        "timecodes_file": timecodes,
        "artist": "A",
        "album": "B",
    }
    values.update(overrides)
    return SplitRequest(**values)  # pyright: ignore[reportArgumentType]


def test_round_trip_issues_cut_then_tag_per_track(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    filesystem: RecordingFilesystem,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    results = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP)))

    assert collaborator.kinds == ["cut", "tag", "cut", "tag"]
    first_cut, first_tag, second_cut, second_tag = (request for _, request in collaborator.calls)

    assert isinstance(first_cut, CutRequest)
    assert (str(first_cut.start), str(first_cut.end)) == ("00:00:00", "00:03:15")
    assert first_cut.destination == Path("A/B/01 - Intro.flac")
    assert first_cut.source == audio_file

    assert isinstance(first_tag, TagRequest)
    assert first_tag.path == Path("A/B/01 - Intro.flac")
    assert (first_tag.track_number, first_tag.track_total) == (1, 2)

    assert isinstance(second_cut, CutRequest)
    assert str(second_cut.start) == "00:03:15"
    assert second_cut.end is None
    assert second_cut.destination == Path("A/B/02 - Track Two.flac")

    assert isinstance(second_tag, TagRequest)
    assert second_tag.path == Path("A/B/02 - Track Two.flac")
    assert (second_tag.track_number, second_tag.track_total) == (2, 2)

    assert filesystem.created == [Path("A/B")]
    assert [r.path for r in results] == [
        Path("A/B/01 - Intro.flac"),
        Path("A/B/02 - Track Two.flac"),
    ]


def test_first_cut_failure_aborts_everything(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    collaborator.fail_cut_on = {1}

    with pytest.raises(CutError, match="Invalid data"):
        _ = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP)))

    assert collaborator.kinds == ["cut"]


def test_tag_failure_aborts_remaining_tracks(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    collaborator.fail_tag_on = {1}

    with pytest.raises(TaggingError):
        _ = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP)))

    assert collaborator.kinds == ["cut", "tag"]


def test_second_cut_failure_keeps_first_track(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    collaborator.fail_cut_on = {2}

    with pytest.raises(CutError):
        _ = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP)))

    assert collaborator.kinds == ["cut", "tag", "cut"]


def test_missing_audio_file_is_checked_first(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    tmp_path: Path,
) -> None:
    with pytest.raises(AudioFileNotFoundError):
        _ = runner.run(_request(tmp_path / "none.mp3", tmp_path / "none.txt"))

    assert collaborator.calls == []


def test_missing_timecodes_file(runner: SplitRunner, audio_file: Path, tmp_path: Path) -> None:
    with pytest.raises(TimecodesNotFoundError):
        _ = runner.run(_request(audio_file, tmp_path / "none.txt"))


def test_parse_errors_stop_before_directory_creation(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    filesystem: RecordingFilesystem,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    with pytest.raises(InvalidTimecodeError):
        _ = runner.run(_request(audio_file, write_timecodes("badtime Intro\n")))

    assert filesystem.created == []
    assert collaborator.calls == []


def test_too_many_tracks_produces_nothing(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    lines = "".join(f"{i // 3600:02d}:{i // 60 % 60:02d}:{i % 60:02d} T{i}\n" for i in range(1000))

    with pytest.raises(TooManyTracksError):
        _ = runner.run(_request(audio_file, write_timecodes(lines)))

    assert collaborator.calls == []


def test_out_of_order_timecodes_are_rejected(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    with pytest.raises(TimecodeOrderError):
        _ = runner.run(_request(audio_file, write_timecodes("00:05:00 A\n00:01:00 B\n")))

    assert collaborator.calls == []


def test_directory_failure_is_fatal(
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    filesystem = RecordingFilesystem(error=PermissionError(13, "Permission denied"))
    runner = SplitRunner(cutter=collaborator, tagger=collaborator, filesystem=filesystem)

    with pytest.raises(DestinationDirectoryError, match="Permission denied"):
        _ = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP)))

    assert collaborator.calls == []


def test_rerun_into_existing_directory_succeeds(
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
    tmp_path: Path,
) -> None:
    runner = SplitRunner(cutter=collaborator, tagger=collaborator, filesystem=LocalFilesystemAdapter())
    request = _request(audio_file, write_timecodes(ROUND_TRIP), output_root=tmp_path / "out")

    _ = runner.run(request)
    _ = runner.run(request)

    assert (tmp_path / "out" / "A" / "B").is_dir()
    assert collaborator.kinds == ["cut", "tag", "cut", "tag"] * 2


def test_destination_is_a_file(
    collaborator: RecordingCollaborator,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
    tmp_path: Path,
) -> None:
    (tmp_path / "A").mkdir()
    (tmp_path / "A" / "B").touch()
    runner = SplitRunner(cutter=collaborator, tagger=collaborator, filesystem=LocalFilesystemAdapter())

    with pytest.raises(DestinationDirectoryError):
        _ = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP), output_root=tmp_path))


def test_dry_run_plans_without_side_effects(
    runner: SplitRunner,
    collaborator: RecordingCollaborator,
    filesystem: RecordingFilesystem,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
) -> None:
    results = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP), dry_run=True))

    assert [r.track.number for r in results] == [1, 2]
    assert all(r.dry_run for r in results)
    assert collaborator.calls == []
    assert filesystem.created == []


def test_progress_line_names_each_output_path(
    runner: SplitRunner,
    audio_file: Path,
    write_timecodes: Callable[[str], Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    import logging

    logger = logging.getLogger("tracksplit")
    logger.addHandler(caplog.handler)
    try:
        _ = runner.run(_request(audio_file, write_timecodes(ROUND_TRIP)))
    finally:
        logger.removeHandler(caplog.handler)

    starts = [r for r in caplog.records if getattr(r, "processing_event", None) == "processing.track.start"]
    assert [r.getMessage() for r in starts] == [
        f'processing track "{Path("A/B/01 - Intro.flac")}"',
        f'processing track "{Path("A/B/02 - Track Two.flac")}"',
    ]
