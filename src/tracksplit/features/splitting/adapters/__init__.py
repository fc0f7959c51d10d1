"""Concrete collaborators for the split runner."""

from .eyed3_tagger import Eyed3Tagger
from .ffmpeg_cutter import FfmpegCutter
from .filesystem_adapter import LocalFilesystemAdapter
from .mutagen_tagger import MutagenTagger

__all__ = ["Eyed3Tagger", "FfmpegCutter", "LocalFilesystemAdapter", "MutagenTagger"]
