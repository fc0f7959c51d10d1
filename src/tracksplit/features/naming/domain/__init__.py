from .formats import DEFAULT_FORMAT, output_format_for
from .track_naming import TrackNaming

__all__ = ["DEFAULT_FORMAT", "TrackNaming", "output_format_for"]
