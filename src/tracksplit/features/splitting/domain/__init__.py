from .models import SplitRequest, TaggerKind, TrackResult

__all__ = ["SplitRequest", "TaggerKind", "TrackResult"]
