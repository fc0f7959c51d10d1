from .segmenter import segment_tracks

__all__ = ["segment_tracks"]
