# Path: `src/tracksplit/features/splitting/__init__.py`
# Summary: Export split run domain models, ports, runner and adapters.
# Why: Provide a stable import surface for the application layer and tests.

from .adapters import Eyed3Tagger, FfmpegCutter, LocalFilesystemAdapter, MutagenTagger
from .domain import SplitRequest, TaggerKind, TrackResult
from .usecases import CutterPort, FilesystemPort, SplitRunner, TaggerPort

__all__ = [
    "CutterPort",
    "Eyed3Tagger",
    "FfmpegCutter",
    "FilesystemPort",
    "LocalFilesystemAdapter",
    "MutagenTagger",
    "SplitRequest",
    "SplitRunner",
    "TaggerKind",
    "TaggerPort",
    "TrackResult",
]
