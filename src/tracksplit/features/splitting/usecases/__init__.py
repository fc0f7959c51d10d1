from .ports import CutterPort, FilesystemPort, TaggerPort
from .split_runner import SplitRunner

__all__ = ["CutterPort", "FilesystemPort", "SplitRunner", "TaggerPort"]
