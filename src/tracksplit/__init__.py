"""tracksplit: split one recording into tagged tracks from a timecode list."""

__version__ = "0.1.0"
