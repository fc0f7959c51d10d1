"""Feature packages: timecode parsing, segmentation, naming and splitting."""
