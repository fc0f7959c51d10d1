# Path: `src/tracksplit/features/tracks/__init__.py`
# Summary: Export track segmentation use cases.

from .usecases import segment_tracks

__all__ = ["segment_tracks"]
