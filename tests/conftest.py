"""Shared pytest fixtures for tracksplit tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fakes import RecordingCollaborator


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the singleton."""

    import tracksplit.config.config as config_module

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("TRACKSPLIT_CONFIG", str(config_file))

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_file
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def collaborator() -> RecordingCollaborator:
    """Provide a fresh recording cutter/tagger."""

    return RecordingCollaborator()


@pytest.fixture
def write_timecodes(tmp_path: Path):
    """Return a helper that writes a timecodes file and returns its path."""

    def _write(content: str, name: str = "timecodes.txt") -> Path:
        path = tmp_path / name
        _ = path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """Create an empty stand-in for the source recording."""

    path = tmp_path / "song.flac"
    path.touch()
    return path
