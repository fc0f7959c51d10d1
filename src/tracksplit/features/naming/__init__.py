# Path: `src/tracksplit/features/naming/__init__.py`
# Summary: Export naming domain rules and request builders.
# Why: Provide a stable import surface for the runner, adapters and tests.

from .domain import DEFAULT_FORMAT, TrackNaming, output_format_for
from .usecases import CutRequest, TagRequest, build_cut_request, build_tag_request

__all__ = [
    "DEFAULT_FORMAT",
    "TrackNaming",
    "output_format_for",
    "CutRequest",
    "TagRequest",
    "build_cut_request",
    "build_tag_request",
]
